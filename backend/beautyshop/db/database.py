# backend/beautyshop/db/database.py

"""
Configuración principal de la base de datos para la aplicación.

Este módulo define los componentes básicos que utiliza toda la aplicación:
- Clase base para modelos (Base)
- DatabaseSessionManager: motor asíncrono con un pool de conexiones acotado
  y una fábrica de sesiones

El gestor no es un global del módulo: se construye en el lifespan de la
aplicación (main.py), se guarda en app.state y llega a los endpoints a
través de la dependencia get_db() de api/deps.py.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from beautyshop.core.exceptions import CatalogError, StoreError

logger = logging.getLogger(__name__)

# Clase base declarativa para todos los modelos ORM
Base = declarative_base()


class DatabaseSessionManager:
    """
    Gestiona el pool de conexiones y las sesiones asíncronas.

    El pool tiene un tamaño fijo (pool_size + max_overflow). Cuando se agota,
    las peticiones esperan un hueco en lugar de fallar; pool_timeout=None
    significa esperar indefinidamente.
    """

    def __init__(
        self,
        database_url: str,
        pool_size: int = 10,
        max_overflow: int = 0,
        pool_timeout: Optional[float] = None,
    ):
        self.engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_timeout=pool_timeout,
            pool_pre_ping=True,
        )
        # expire_on_commit=False es importante para que los objetos sigan siendo
        # utilizables después de que la transacción se haya confirmado.
        self._session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Proporciona una sesión y la devuelve al pool al terminar.

        Cualquier error de SQLAlchemy se registra con su detalle, se hace
        rollback y se relanza como StoreError con un mensaje genérico.
        """
        session = self._session_factory()
        try:
            yield session
        except CatalogError:
            await session.rollback()
            raise
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"❌ BD: Error ejecutando sentencia: {e}")
            raise StoreError(str(e), "execute") from e
        finally:
            await session.close()

    async def create_tables(self) -> None:
        """Crea las tablas que falten (no es un sistema de migraciones)."""
        # Importa los modelos para registrarlos en Base.metadata
        from beautyshop.db.models import brand_model, category_model, product_model  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("✅ BD: Tablas verificadas")

    async def health_check(self) -> bool:
        """Comprueba la conectividad con la base de datos (readiness)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"⚠️ BD: Health check fallido: {e}")
            return False

    async def close(self) -> None:
        """Cierra el pool. Las conexiones en uso se cierran al devolverse."""
        await self.engine.dispose()
        logger.info("BD: Pool de conexiones cerrado")
