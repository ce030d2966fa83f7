"""
Endpoints REST para operaciones CRUD de categorías.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from beautyshop.api import deps
from beautyshop.schemas import category_schema, message_schema
from beautyshop.services.category_service import category_service

router = APIRouter()

@router.get("", response_model=List[category_schema.CategoryResponse])
async def read_categories(
    db: AsyncSession = Depends(deps.get_db),
) -> List[category_schema.CategoryResponse]:
    """Obtiene todas las categorías."""
    return await category_service.get_all_categories(db)


@router.post("", response_model=message_schema.CreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    *,
    db: AsyncSession = Depends(deps.get_db),
    category_in: Optional[category_schema.CategoryCreate] = None,
) -> message_schema.CreatedResponse:
    """Crea una nueva categoría en el sistema."""
    category = await category_service.create_new_category(
        db=db, category_in=category_in or category_schema.CategoryCreate()
    )
    return message_schema.CreatedResponse(message="Category added successfully", id=category.id)


@router.put("/{category_id}", response_model=message_schema.MessageResponse)
async def update_category(
    *,
    db: AsyncSession = Depends(deps.get_db),
    category_id: str,
    category_in: Optional[category_schema.CategoryUpdate] = None,
) -> message_schema.MessageResponse:
    """Actualiza el nombre de una categoría."""
    await category_service.update_existing_category(
        db=db,
        category_id=deps.parse_id(category_id),
        category_in=category_in or category_schema.CategoryUpdate(),
    )
    return message_schema.MessageResponse(message="Category updated successfully")


@router.delete("/{category_id}", response_model=message_schema.MessageResponse)
async def delete_category(
    *,
    db: AsyncSession = Depends(deps.get_db),
    category_id: str,
) -> message_schema.MessageResponse:
    """Elimina una categoría del sistema."""
    await category_service.delete_existing_category(db=db, category_id=deps.parse_id(category_id))
    return message_schema.MessageResponse(message="Category deleted successfully")
