# backend/beautyshop/main.py
"""
Punto de entrada principal de la aplicación FastAPI.

Este módulo configura y inicializa la aplicación completa:
- Ciclo de vida (lifespan): logging, pool de conexiones y su cierre
- CORS abierto a cualquier origen
- Manejadores globales de errores
- Registro del router de la API
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from beautyshop.core.config import settings  # Configuración centralizada de la aplicación
from beautyshop.core.logging_config import setup_logging
from beautyshop.db.database import DatabaseSessionManager
from beautyshop.api.error_handlers import register_error_handlers
from beautyshop.api.v1.api_router import api_router_v1  # Router principal de la API

logger = logging.getLogger(__name__)

# ========================================
# EVENTOS DEL CICLO DE VIDA DE LA APLICACIÓN
# ========================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Arranque: configura el logging y construye el pool de conexiones.
    Cierre: libera el pool cuando uvicorn ha terminado las peticiones en curso.
    """
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    manager = DatabaseSessionManager(
        settings.DATABASE_URI,
        pool_size=settings.DB_CONNECTION_LIMIT,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
    )
    if settings.DB_CREATE_TABLES:
        await manager.create_tables()
    app.state.db_manager = manager
    logger.info(f"✅ {settings.PROJECT_NAME} v{settings.PROJECT_VERSION} escuchando en el puerto {settings.PORT}")
    yield
    logger.info(f"{settings.PROJECT_NAME} cerrándose")
    await manager.close()

# ========================================
# CONFIGURACIÓN DE LA APLICACIÓN FASTAPI
# ========================================

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.PROJECT_VERSION,
    description="API del catálogo de la tienda: productos, marcas y categorías",
    lifespan=lifespan,
)

# Las peticiones cross-origin se aceptan desde cualquier origen
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# ========================================
# REGISTRO DE ROUTERS DE LA API
# ========================================

app.include_router(api_router_v1, prefix=settings.API_PREFIX)


@app.get("/", tags=["Root"])
async def read_root():
    """
    Endpoint raíz para verificación básica del estado de la API.

    Example:
        GET /
        Response: {"message": "Bienvenido a Beauty Shop API v1.0.0"}
    """
    return {"message": f"Bienvenido a {settings.PROJECT_NAME} v{settings.PROJECT_VERSION}"}


if __name__ == "__main__":
    uvicorn.run("beautyshop.main:app", host=settings.HOST, port=settings.PORT)
