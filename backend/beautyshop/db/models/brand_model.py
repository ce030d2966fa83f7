# backend/beautyshop/db/models/brand_model.py
"""
Se encarga de definir el modelo de marca para la aplicación.
"""

from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from beautyshop.db.database import Base

class Brand(Base):
    __tablename__ = "brands"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    # Sin reglas de cascada: borrar una categoría puede dejar marcas huérfanas
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True)

    category = relationship("Category", back_populates="brands")
    products = relationship("Product", back_populates="brand")
