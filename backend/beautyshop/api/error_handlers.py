# backend/beautyshop/api/error_handlers.py
"""
Manejadores globales de excepciones.

Todas las respuestas de error tienen la misma forma: {"error": "<mensaje>"}.

- CatalogError → su código HTTP y su mensaje público
- SQLAlchemyError que escape de una ruta → 500 genérico; el detalle solo va al log
- RequestValidationError: JSON ilegible → 400; cualquier otro cuerpo que no
  encaje en el esquema (por ejemplo, un objeto donde va un número) → 500, igual
  que si la base de datos rechazara el valor
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from beautyshop.core.exceptions import CatalogError, StoreError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Registra los manejadores globales en la aplicación."""

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        if isinstance(exc, StoreError):
            logger.error(
                f"❌ ERROR: {request.method} {request.url.path} falló en '{exc.operation}': {exc.detail}"
            )
        else:
            logger.warning(f"⚠️ {request.method} {request.url.path}: {exc.message}")
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error(f"❌ ERROR: {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal Server Error"},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        if any(error.get("type") == "json_invalid" for error in errors):
            logger.warning(f"⚠️ JSON ilegible en {request.method} {request.url.path}")
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"error": "Invalid request data"},
            )
        logger.error(f"❌ ERROR: {request.method} {request.url.path} con datos no válidos: {errors}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal Server Error"},
        )
