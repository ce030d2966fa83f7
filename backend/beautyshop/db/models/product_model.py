# backend/beautyshop/db/models/product_model.py
from sqlalchemy import Column, Integer, String, ForeignKey, Text, Numeric
from sqlalchemy.orm import relationship

from beautyshop.db.database import Base

class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False, index=True)
    price = Column(Numeric(10, 2), nullable=False)  # Precisión decimal para precios
    image_url = Column(String(500), nullable=True)
    brand_id = Column(Integer, ForeignKey("brands.id"), nullable=True)
    info = Column(Text, nullable=True)

    brand = relationship("Brand", back_populates="products")
