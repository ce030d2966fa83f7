# backend/beautyshop/services/category_service.py
"""
Servicio para operaciones de negocio relacionadas con categorías.

Actúa como proxy hacia la capa CRUD. No hay reglas de negocio propias:
borrar una categoría con marcas asociadas está permitido.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from beautyshop.db.models.category_model import Category
from beautyshop.crud import category_crud
from beautyshop.schemas import category_schema

class CategoryService:
    """Servicio para operaciones de negocio relacionadas con categorías."""

    async def get_all_categories(self, db: AsyncSession) -> List[Category]:
        return await category_crud.get_categories(db)

    async def create_new_category(self, db: AsyncSession, category_in: category_schema.CategoryCreate) -> Category:
        return await category_crud.create_category(db=db, category=category_in)

    async def update_existing_category(self, db: AsyncSession, category_id: Optional[int], category_in: category_schema.CategoryUpdate) -> None:
        await category_crud.update_category(db, category_id, category_in)

    async def delete_existing_category(self, db: AsyncSession, category_id: Optional[int]) -> None:
        await category_crud.delete_category(db, category_id=category_id)

# ========================================
# INSTANCIA SINGLETON DEL SERVICIO
# ========================================

category_service = CategoryService()
