# backend/beautyshop/api/v1/api_router.py
"""
Este archivo contiene el router principal de la API.

Se encarga de registrar y configurar todos los routers por dominio.
"""

from fastapi import APIRouter

# Importación de routers especializados por dominio de negocio
from beautyshop.api.v1.endpoints import (
    products,
    categories,
    brands,
    health,
)

# ========================================
# CONFIGURACIÓN DEL ROUTER PRINCIPAL
# ========================================

api_router_v1 = APIRouter()

# ========================================
# REGISTRO DE ROUTERS POR DOMINIO DE NEGOCIO
# ========================================

# ROUTER DE PRODUCTOS
# Catálogo anidado y operaciones CRUD de productos
api_router_v1.include_router(
    products.router,
    prefix="/products",             # Prefijo: /products
    tags=["Products"]               # Tag para documentación OpenAPI/Swagger
)

# ROUTER DE CATEGORÍAS
api_router_v1.include_router(
    categories.router,
    prefix="/categories",
    tags=["Categories"]
)

# ROUTER DE MARCAS
api_router_v1.include_router(
    brands.router,
    prefix="/brands",
    tags=["Brands"]
)

# ROUTER DE SALUD
# Sondas de liveness y readiness
api_router_v1.include_router(
    health.router,
    prefix="/health",
    tags=["Health"]
)
