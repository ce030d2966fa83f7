# backend/beautyshop/schemas/category_schema.py

"""
Esquemas Pydantic para el modelo Category.

Patrón de esquemas utilizado:
- CategoryBase: Propiedades comunes compartidas
- CategoryCreate: Para crear nuevas categorías (POST)
- CategoryUpdate: Para reemplazar categorías existentes (PUT)
- CategoryResponse: Para respuestas de la API (GET)

Los campos de entrada son opcionales: la API no valida el cuerpo más allá
de su forma, y un campo ausente llega a la base de datos como NULL.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict

# ========================================
# ESQUEMA BASE
# ========================================

class CategoryBase(BaseModel):
    """Propiedades comunes compartidas entre esquemas de categoría."""
    name: Optional[str] = None

    # Un número en un campo de texto se guarda como texto, como haría la columna VARCHAR
    model_config = ConfigDict(coerce_numbers_to_str=True)


# ========================================
# ESQUEMAS PARA OPERACIONES
# ========================================

class CategoryCreate(CategoryBase):
    """Esquema para crear una nueva categoría. El ID lo genera la base de datos."""
    pass


class CategoryUpdate(CategoryBase):
    """Esquema para reemplazar una categoría. Los campos ausentes se escriben como NULL."""
    pass


# ========================================
# ESQUEMA DE RESPUESTA
# ========================================

class CategoryResponse(BaseModel):
    """Esquema para las respuestas de la API al leer categorías."""
    id: int
    name: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
