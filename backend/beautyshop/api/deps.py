# backend/beautyshop/api/deps.py
"""
Módulo de dependencias para FastAPI.

Este archivo centraliza las dependencias que se inyectan en los endpoints.
El gestor de base de datos se construye en el lifespan y se guarda en
app.state; aquí solo se toma una sesión de él para cada petición.
"""

import re
from typing import AsyncGenerator, Optional

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from beautyshop.core.exceptions import StoreError
from beautyshop.db.database import DatabaseSessionManager

# Columnas INTEGER de 32 bits
_MAX_ID = 2**31 - 1
_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def get_db_manager(request: Request) -> DatabaseSessionManager:
    """Devuelve el gestor de base de datos de la aplicación."""
    manager = getattr(request.app.state, "db_manager", None)
    if manager is None:
        raise StoreError("Database not initialized", operation="connect")
    return manager


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependencia de FastAPI para obtener una sesión de base de datos asíncrona.
    La conexión vuelve al pool al terminar la petición.
    """
    async with get_db_manager(request).session() as session:
        yield session


def parse_id(raw: str) -> Optional[int]:
    """
    Convierte el ID de la ruta en entero.

    Un ID no numérico (o fuera del rango de la columna) no corresponde a
    ninguna fila: devuelve None, que en SQL se compara como `id IS NULL`.
    Así /products/abc se comporta como un ID inexistente (404 al leer,
    200 sin cambios al actualizar o borrar) en lugar de un error de petición.
    """
    if not _ID_PATTERN.fullmatch(raw):
        return None
    value = int(raw)
    if abs(value) > _MAX_ID:
        return None
    return value
