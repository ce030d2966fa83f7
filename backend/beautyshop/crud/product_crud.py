# backend/beautyshop/crud/product_crud.py

"""
Operaciones CRUD para el modelo Product.

Este módulo implementa las operaciones de Create, Read, Update, Delete para
productos, y la consulta del catálogo que une productos, marcas y
categorías para construir la vista anidada de GET /products.

Funcionalidades principales:
- Consulta del catálogo con JOIN products → brands → categories
- Lectura de la fila completa de un producto por ID
- Inserción, reemplazo completo y borrado por ID
- Borrado por nombre (se compara con la columna title)
"""

from typing import Any, List, Mapping, Optional
from sqlalchemy import select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession

from beautyshop.db.models.brand_model import Brand
from beautyshop.db.models.category_model import Category
from beautyshop.db.models.product_model import Product
from beautyshop.schemas import product_schema

import logging

logger = logging.getLogger(__name__)

# ========================================
# OPERACIONES DE LECTURA (READ)
# ========================================

async def get_catalog_rows(db: AsyncSession) -> List[Mapping[str, Any]]:
    """
    Obtiene las filas planas del catálogo.

    Solo aparecen los productos cuya marca y categoría existen (INNER JOIN).
    Cada fila lleva: id, category_name, brand_name, title, price,
    image_url, info.
    """
    query = (
        select(
            Product.id,
            Category.name.label("category_name"),
            Brand.name.label("brand_name"),
            Product.title,
            Product.price,
            Product.image_url,
            Product.info,
        )
        .join(Brand, Product.brand_id == Brand.id)
        .join(Category, Brand.category_id == Category.id)
    )
    result = await db.execute(query)
    rows = result.mappings().all()
    logger.debug(f"Consulta de catálogo devolvió {len(rows)} filas.")
    return rows


async def get_product(db: AsyncSession, product_id: Optional[int]) -> Optional[Product]:
    """Obtiene un producto por su ID."""
    result = await db.execute(select(Product).filter(Product.id == product_id))
    return result.scalars().first()


# ========================================
# OPERACIONES DE ESCRITURA (CREATE, UPDATE, DELETE)
# ========================================

async def create_product(db: AsyncSession, product_data: product_schema.ProductCreate) -> Product:
    """Crea un nuevo producto. No verifica que brand_id exista."""
    db_product = Product(
        title=product_data.title,
        price=product_data.price,
        image_url=product_data.image_url,
        brand_id=product_data.brand_id,
        info=product_data.info,
    )
    db.add(db_product)
    await db.commit()
    await db.refresh(db_product)
    return db_product


async def update_product(db: AsyncSession, product_id: Optional[int], product_update: product_schema.ProductUpdate) -> None:
    """Reemplaza todos los campos de un producto. Los ausentes se escriben como NULL."""
    await db.execute(
        update(Product)
        .where(Product.id == product_id)
        .values(
            title=product_update.title,
            price=product_update.price,
            image_url=product_update.image_url,
            brand_id=product_update.brand_id,
            info=product_update.info,
        )
    )
    await db.commit()


async def delete_product(db: AsyncSession, product_id: Optional[int]) -> None:
    """Elimina un producto por ID."""
    await db.execute(delete(Product).where(Product.id == product_id))
    await db.commit()


async def delete_products_by_title(db: AsyncSession, title: Optional[str]) -> None:
    """
    Elimina los productos cuyo título coincide exactamente.

    Con title=None SQLAlchemy genera `title IS NULL`; la columna es NOT NULL,
    así que no se borra nada.
    """
    await db.execute(delete(Product).where(Product.title == title))
    await db.commit()
