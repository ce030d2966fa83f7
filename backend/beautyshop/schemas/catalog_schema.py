# backend/beautyshop/schemas/catalog_schema.py

"""
Esquemas Pydantic para la vista anidada del catálogo (GET /products).

Estructura:
    {
        "categories": [
            {
                "name": "Skin Care Products",
                "brands": {
                    "Glow Lab": {
                        "name": "Glow Lab",
                        "items": [
                            {
                                "title": "Hydrating Serum",
                                "price": "19.50",
                                "image": {"fields": {"file": {"url": "https://..."}}},
                                "info": "30 ml"
                            }
                        ]
                    }
                }
            },
            null,
            ...
        ]
    }

La lista `categories` siempre tiene una posición por cada categoría de la
lista de preferencia; las que no tienen productos aparecen como null.
La forma de `image` es la que espera el frontend existente.
"""

from typing import Dict, List, Optional
from pydantic import BaseModel

# ========================================
# ESQUEMAS AUXILIARES
# ========================================

class ImageFile(BaseModel):
    url: Optional[str] = None


class ImageFields(BaseModel):
    file: ImageFile


class CatalogImage(BaseModel):
    fields: ImageFields


# ========================================
# NODOS DEL ÁRBOL
# ========================================

class CatalogItem(BaseModel):
    """Producto dentro de una marca. El precio ya viene formateado con dos decimales."""
    title: Optional[str] = None
    price: str
    image: CatalogImage
    info: Optional[str] = None


class CatalogBrand(BaseModel):
    name: Optional[str] = None
    items: List[CatalogItem]


class CatalogCategory(BaseModel):
    name: Optional[str] = None
    brands: Dict[str, CatalogBrand]


# ========================================
# ESQUEMA DE RESPUESTA
# ========================================

class CatalogResponse(BaseModel):
    """Respuesta completa de GET /products."""
    categories: List[Optional[CatalogCategory]]
