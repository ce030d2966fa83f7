# backend/beautyshop/services/brand_service.py
"""
Servicio para operaciones de negocio relacionadas con marcas.

Es el único servicio con validaciones propias, y no son simétricas:
- Al crear, category_id debe venir informado (no se comprueba que exista).
- Al actualizar, category_id debe existir en la tabla categories.

La comprobación de existencia y el UPDATE son dos sentencias independientes,
sin transacción que las agrupe.
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
import logging

from beautyshop.core.exceptions import StoreError, ValidationError
from beautyshop.crud import brand_crud, category_crud
from beautyshop.db.models.brand_model import Brand
from beautyshop.schemas import brand_schema

logger = logging.getLogger(__name__)


class BrandService:
    """Servicio para operaciones de negocio relacionadas con marcas."""

    async def get_all_brands(self, db: AsyncSession) -> List[Brand]:
        return await brand_crud.get_brands(db)

    async def create_new_brand(self, db: AsyncSession, brand_in: brand_schema.BrandCreate) -> Brand:
        """
        Crea una marca tras comprobar que category_id viene informado.

        Un category_id ausente, null o 0 se rechaza antes de tocar la base de datos.

        Raises:
            ValidationError: si falta category_id
        """
        logger.info(f"🆕 MARCA: Datos recibidos name={brand_in.name!r} category_id={brand_in.category_id!r}")
        if not brand_in.category_id:
            raise ValidationError("Category ID is required")
        return await brand_crud.create_brand(db, brand=brand_in)

    async def update_existing_brand(self, db: AsyncSession, brand_id: Optional[int], brand_in: brand_schema.BrandUpdate) -> None:
        """
        Reemplaza una marca tras comprobar que la categoría destino existe.

        Raises:
            ValidationError: si category_id no corresponde a ninguna categoría
            StoreError: cualquier fallo de la base de datos, con un mensaje
                propio de esta operación
        """
        try:
            if not await category_crud.category_exists(db, brand_in.category_id):
                raise ValidationError("Invalid categoryId. Category does not exist.")
            await brand_crud.update_brand(db, brand_id=brand_id, brand_update=brand_in)
        except SQLAlchemyError as e:
            logger.error(f"❌ MARCA: Error SQL actualizando marca {brand_id}: {e}")
            raise StoreError(
                str(e),
                operation="update brand",
                message="Error updating brand. Please check your input data.",
            ) from e

    async def delete_existing_brand(self, db: AsyncSession, brand_id: Optional[int]) -> None:
        await brand_crud.delete_brand(db, brand_id=brand_id)

# ========================================
# INSTANCIA SINGLETON DEL SERVICIO
# ========================================

brand_service = BrandService()
