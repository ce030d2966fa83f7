# backend/beautyshop/api/v1/endpoints/brands.py
"""
Endpoints REST para operaciones CRUD de marcas.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from beautyshop.api import deps
from beautyshop.schemas import brand_schema, message_schema
from beautyshop.services.brand_service import brand_service

router = APIRouter()

@router.get("", response_model=List[brand_schema.BrandResponse])
async def read_brands(
    db: AsyncSession = Depends(deps.get_db),
) -> List[brand_schema.BrandResponse]:
    """Obtiene todas las marcas."""
    return await brand_service.get_all_brands(db)


@router.post("", response_model=message_schema.CreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_brand(
    *,
    db: AsyncSession = Depends(deps.get_db),
    brand_in: Optional[brand_schema.BrandCreate] = None,
) -> message_schema.CreatedResponse:
    """Añade una marca. Requiere category_id."""
    brand = await brand_service.create_new_brand(db, brand_in=brand_in or brand_schema.BrandCreate())
    return message_schema.CreatedResponse(message="Brand added successfully", id=brand.id)


@router.put("/{brand_id}", response_model=message_schema.MessageResponse)
async def update_brand(
    *,
    db: AsyncSession = Depends(deps.get_db),
    brand_id: str,
    brand_in: Optional[brand_schema.BrandUpdate] = None,
) -> message_schema.MessageResponse:
    """Reemplaza una marca. category_id debe existir."""
    await brand_service.update_existing_brand(
        db,
        brand_id=deps.parse_id(brand_id),
        brand_in=brand_in or brand_schema.BrandUpdate(),
    )
    return message_schema.MessageResponse(message="Brand updated successfully")


@router.delete("/{brand_id}", response_model=message_schema.MessageResponse)
async def delete_brand(
    *,
    db: AsyncSession = Depends(deps.get_db),
    brand_id: str,
) -> message_schema.MessageResponse:
    """Elimina una marca por ID."""
    await brand_service.delete_existing_brand(db, brand_id=deps.parse_id(brand_id))
    return message_schema.MessageResponse(message="Brand deleted successfully")
