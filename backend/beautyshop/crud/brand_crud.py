# backend/beautyshop/crud/brand_crud.py

"""
Operaciones CRUD para el modelo Brand.

Las comprobaciones de category_id (presencia al crear, existencia al
actualizar) viven en services/brand_service.py; aquí solo se ejecutan las
sentencias.
"""

from typing import List, Optional
from sqlalchemy import select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession

from beautyshop.db.models.brand_model import Brand
from beautyshop.schemas import brand_schema

# ========================================
# OPERACIONES DE LECTURA (READ)
# ========================================

async def get_brand(db: AsyncSession, brand_id: Optional[int]) -> Optional[Brand]:
    """Obtiene una marca por su ID."""
    result = await db.execute(select(Brand).filter(Brand.id == brand_id))
    return result.scalars().first()


async def get_brands(db: AsyncSession) -> List[Brand]:
    """Obtiene todas las marcas, sin filtros ni paginación."""
    result = await db.execute(select(Brand))
    return result.scalars().all()


# ========================================
# OPERACIONES DE ESCRITURA (CREATE, UPDATE, DELETE)
# ========================================

async def create_brand(db: AsyncSession, brand: brand_schema.BrandCreate) -> Brand:
    """Crea una nueva marca. No verifica que la categoría exista."""
    db_brand = Brand(name=brand.name, category_id=brand.category_id)
    db.add(db_brand)
    await db.commit()
    await db.refresh(db_brand)
    return db_brand


async def update_brand(db: AsyncSession, brand_id: Optional[int], brand_update: brand_schema.BrandUpdate) -> None:
    """Reemplaza nombre y categoría de una marca."""
    await db.execute(
        update(Brand)
        .where(Brand.id == brand_id)
        .values(name=brand_update.name, category_id=brand_update.category_id)
    )
    await db.commit()


async def delete_brand(db: AsyncSession, brand_id: Optional[int]) -> None:
    """Elimina una marca por ID. Sus productos quedan apuntando a un ID inexistente."""
    await db.execute(delete(Brand).where(Brand.id == brand_id))
    await db.commit()
