# backend/beautyshop/schemas/brand_schema.py
"""
Se encarga de definir los esquemas Pydantic para el modelo Brand.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict

# ========================================
# ESQUEMA BASE
# ========================================

class BrandBase(BaseModel):
    """Propiedades comunes compartidas entre esquemas de marca."""
    name: Optional[str] = None
    category_id: Optional[int] = None  # La presencia se comprueba en el servicio, no aquí

    model_config = ConfigDict(coerce_numbers_to_str=True)


# ========================================
# ESQUEMAS PARA OPERACIONES
# ========================================

class BrandCreate(BrandBase):
    """Esquema para crear una nueva marca."""
    pass


class BrandUpdate(BrandBase):
    """Esquema para reemplazar una marca existente."""
    pass


# ========================================
# ESQUEMA DE RESPUESTA
# ========================================

class BrandResponse(BaseModel):
    """Esquema para las respuestas de la API al leer marcas."""
    id: int
    name: Optional[str] = None
    category_id: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)
