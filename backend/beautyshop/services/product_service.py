# backend/beautyshop/services/product_service.py

"""
Capa de servicios para operaciones de negocio relacionadas con productos.

Orquesta la consulta del catálogo (filas planas → árbol anidado) y traslada
al repositorio las operaciones de escritura, que no llevan validación
adicional: brand_id no se comprueba y los campos ausentes llegan como NULL.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from typing import Any, Dict, Optional
import logging

from beautyshop.core.exceptions import NotFoundError
from beautyshop.crud import product_crud
from beautyshop.db.models.product_model import Product
from beautyshop.schemas import product_schema
from beautyshop.services.catalog_builder import build_catalog

logger = logging.getLogger(__name__)


class ProductService:
    """
    Servicio para operaciones de negocio relacionadas con productos.

    Características principales:
    - Vista de catálogo agrupada por categoría y marca
    - Lectura por ID con NotFoundError si no existe
    - Escrituras sin comprobaciones de integridad referencial
    """

    # ========================================
    # OPERACIONES DE CONSULTA
    # ========================================

    async def get_catalog(self, db: AsyncSession) -> Dict[str, Any]:
        """Obtiene el catálogo completo como árbol categoría → marca → productos."""
        rows = await product_crud.get_catalog_rows(db)
        return build_catalog(rows)

    async def get_product_by_id(self, db: AsyncSession, product_id: Optional[int]) -> Product:
        """
        Obtiene un producto por su ID.

        Raises:
            NotFoundError: si ninguna fila coincide
        """
        product = await product_crud.get_product(db, product_id=product_id)
        if not product:
            raise NotFoundError("Product not found")
        return product

    # ========================================
    # OPERACIONES DE ESCRITURA
    # ========================================

    async def create_new_product(self, db: AsyncSession, product_in: product_schema.ProductCreate) -> Product:
        """Inserta un producto y devuelve la fila creada (con su ID)."""
        product = await product_crud.create_product(db, product_data=product_in)
        logger.info(f"✅ PRODUCTO: Creado ID {product.id} '{product.title}'")
        return product

    async def update_existing_product(self, db: AsyncSession, product_id: Optional[int], product_in: product_schema.ProductUpdate) -> None:
        """Reemplaza la fila del producto. No informa si el ID no existía."""
        await product_crud.update_product(db, product_id=product_id, product_update=product_in)

    async def delete_product_by_id(self, db: AsyncSession, product_id: Optional[int]) -> None:
        """Borra por ID; tiene éxito aunque no existiera."""
        await product_crud.delete_product(db, product_id=product_id)

    async def delete_products_by_name(self, db: AsyncSession, name: Optional[str]) -> None:
        """Borra por nombre. La tabla no tiene columna name: se compara con title."""
        await product_crud.delete_products_by_title(db, title=name)

# ========================================
# INSTANCIA SINGLETON DEL SERVICIO
# ========================================

product_service = ProductService()
