# backend/beautyshop/api/v1/endpoints/products.py

"""
Endpoints REST para el catálogo y las operaciones CRUD de productos.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
import logging

from beautyshop.api import deps
from beautyshop.schemas import catalog_schema, message_schema, product_schema
from beautyshop.services.product_service import product_service

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("", response_model=catalog_schema.CatalogResponse)
async def read_catalog(
    db: AsyncSession = Depends(deps.get_db),
) -> catalog_schema.CatalogResponse:
    """Obtiene el catálogo agrupado por categoría y marca."""
    logger.debug("📋 PRODUCTOS: Construyendo catálogo")
    return await product_service.get_catalog(db)


@router.get("/{product_id}", response_model=product_schema.ProductResponse)
async def read_product(
    *,
    db: AsyncSession = Depends(deps.get_db),
    product_id: str,
) -> product_schema.ProductResponse:
    """Obtiene la fila completa de un producto por ID."""
    logger.debug(f"🔍 PRODUCTO: Buscando producto ID {product_id}")
    return await product_service.get_product_by_id(db, product_id=deps.parse_id(product_id))


@router.post("", response_model=message_schema.CreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    *,
    db: AsyncSession = Depends(deps.get_db),
    product_in: Optional[product_schema.ProductCreate] = None,
) -> message_schema.CreatedResponse:
    """Añade un nuevo producto. Sin cuerpo, todos los campos llegan como NULL."""
    product_in = product_in or product_schema.ProductCreate()
    logger.info(f"🆕 PRODUCTO: Creando producto '{product_in.title}'")
    product = await product_service.create_new_product(db, product_in=product_in)
    return message_schema.CreatedResponse(message="Product added successfully", id=product.id)


@router.put("/{product_id}", response_model=message_schema.MessageResponse)
async def update_product(
    *,
    db: AsyncSession = Depends(deps.get_db),
    product_id: str,
    product_in: Optional[product_schema.ProductUpdate] = None,
) -> message_schema.MessageResponse:
    """Reemplaza todos los campos de un producto."""
    logger.info(f"🔄 PRODUCTO: Actualizando producto ID {product_id}")
    await product_service.update_existing_product(
        db,
        product_id=deps.parse_id(product_id),
        product_in=product_in or product_schema.ProductUpdate(),
    )
    return message_schema.MessageResponse(message="Product updated successfully")


@router.delete("/{product_id}", response_model=message_schema.MessageResponse)
async def delete_product(
    *,
    db: AsyncSession = Depends(deps.get_db),
    product_id: str,
) -> message_schema.MessageResponse:
    """Elimina un producto por ID. Responde 200 aunque no existiera."""
    logger.info(f"🗑️ PRODUCTO: Eliminando producto ID {product_id}")
    await product_service.delete_product_by_id(db, product_id=deps.parse_id(product_id))
    return message_schema.MessageResponse(message="Product deleted successfully")


@router.delete("", response_model=message_schema.MessageResponse)
async def delete_product_by_name(
    *,
    db: AsyncSession = Depends(deps.get_db),
    payload: Optional[product_schema.ProductDeleteByName] = None,
) -> message_schema.MessageResponse:
    """Elimina los productos cuyo título coincide con `name`."""
    name = payload.name if payload else None
    logger.info(f"🗑️ PRODUCTO: Eliminando productos con título {name!r}")
    await product_service.delete_products_by_name(db, name=name)
    return message_schema.MessageResponse(message="Product deleted successfully")
