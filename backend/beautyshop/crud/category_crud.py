# backend/beautyshop/crud/category_crud.py

"""
Operaciones CRUD para el modelo Category.

Este módulo implementa las operaciones de Create, Read, Update, Delete para
categorías, proporcionando una capa de abstracción entre los endpoints de la
API y la base de datos.

Todas las sentencias se construyen con SQLAlchemy y usan parámetros
enlazados; nunca se interpolan valores del cliente en el SQL.

Patrones implementados:
- Repository pattern: Abstrae las consultas de SQLAlchemy
- Reemplazo completo en update: todos los campos se escriben en cada PUT
- Borrado incondicional: no se comprueba si la fila existía
"""

from typing import List, Optional
from sqlalchemy import select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession

from beautyshop.db.models.category_model import Category
from beautyshop.schemas import category_schema

# ========================================
# OPERACIONES DE LECTURA (READ)
# ========================================

async def get_category(db: AsyncSession, category_id: Optional[int]) -> Optional[Category]:
    """
    Obtiene una categoría por su ID.

    Args:
        db: Sesión de SQLAlchemy
        category_id: ID único de la categoría

    Returns:
        Objeto Category si existe, None si no se encuentra
    """
    result = await db.execute(select(Category).filter(Category.id == category_id))
    return result.scalars().first()


async def category_exists(db: AsyncSession, category_id: Optional[int]) -> bool:
    """Indica si existe una categoría con ese ID. Solo consulta la columna id."""
    result = await db.execute(select(Category.id).filter(Category.id == category_id))
    return result.first() is not None


async def get_categories(db: AsyncSession) -> List[Category]:
    """
    Obtiene todas las categorías.

    Sin paginación ni orden explícito: se devuelve lo que entregue la base
    de datos.
    """
    result = await db.execute(select(Category))
    return result.scalars().all()


# ========================================
# OPERACIONES DE ESCRITURA (CREATE, UPDATE, DELETE)
# ========================================

async def create_category(db: AsyncSession, category: category_schema.CategoryCreate) -> Category:
    """
    Crea una nueva categoría en la base de datos.

    Returns:
        Objeto Category recién creado, con el ID generado por la base de datos
    """
    db_category = Category(name=category.name)
    db.add(db_category)
    await db.commit()  # Persiste en la base de datos
    await db.refresh(db_category)  # Recarga el objeto con el ID asignado
    return db_category


async def update_category(db: AsyncSession, category_id: Optional[int], category_update: category_schema.CategoryUpdate) -> None:
    """
    Reemplaza los campos de una categoría.

    Equivale a `UPDATE categories SET name = ? WHERE id = ?`: si el ID no
    existe no se modifica nada y tampoco se informa.
    """
    await db.execute(
        update(Category)
        .where(Category.id == category_id)
        .values(name=category_update.name)
    )
    await db.commit()


async def delete_category(db: AsyncSession, category_id: Optional[int]) -> None:
    """
    Elimina una categoría por ID.

    Las marcas que apunten a esta categoría no se tocan: pueden quedar
    huérfanas.
    """
    await db.execute(delete(Category).where(Category.id == category_id))
    await db.commit()
