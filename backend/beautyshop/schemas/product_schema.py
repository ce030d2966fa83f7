# backend/beautyshop/schemas/product_schema.py

"""
Esquemas Pydantic para el modelo Product.

Este módulo define los esquemas para manejar productos en la API:
- ProductCreate / ProductUpdate: cuerpo de POST y PUT (reemplazo completo)
- ProductDeleteByName: cuerpo de DELETE /products
- ProductResponse: fila de la tabla products tal como se almacena

Notas sobre tipos de datos:
- price: Decimal en Pydantic y Numeric(10,2) en SQLAlchemy. En las respuestas
  JSON Pydantic lo serializa como cadena ("19.50"), igual que el driver
  devuelve las columnas DECIMAL.
- Ningún campo de entrada es obligatorio: los ausentes llegan como NULL y es
  la base de datos quien los rechaza si la columna no los admite.
"""

from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, ConfigDict

# ========================================
# ESQUEMA BASE
# ========================================

class ProductBase(BaseModel):
    """Propiedades comunes de un producto."""
    title: Optional[str] = None
    price: Optional[Decimal] = None
    image_url: Optional[str] = None  # Se guarda tal cual, sin validar el formato
    brand_id: Optional[int] = None  # No se comprueba que la marca exista
    info: Optional[str] = None

    model_config = ConfigDict(coerce_numbers_to_str=True)


# ========================================
# ESQUEMAS PARA OPERACIONES
# ========================================

class ProductCreate(ProductBase):
    """
    Esquema para crear un nuevo producto.

    Ejemplo de uso:
    POST /products
    {
        "title": "Hydrating Serum",
        "price": 19.5,
        "image_url": "https://cdn.example.com/serum.jpg",
        "brand_id": 3,
        "info": "30 ml"
    }
    """
    pass


class ProductUpdate(ProductBase):
    """
    Esquema para reemplazar un producto existente.

    PUT reemplaza la fila completa: los campos que no se envían quedan a NULL.
    """
    pass


class ProductDeleteByName(BaseModel):
    """Cuerpo de DELETE /products. `name` se compara con el título del producto."""
    name: Optional[str] = None

    model_config = ConfigDict(coerce_numbers_to_str=True)


# ========================================
# ESQUEMA DE RESPUESTA
# ========================================

class ProductResponse(ProductBase):
    """Fila completa de un producto."""
    id: int

    model_config = ConfigDict(from_attributes=True)
