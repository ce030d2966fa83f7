"""Fixtures de tests — base de datos SQLite en memoria + cliente HTTP de FastAPI.

- Cada test tiene una base de datos nueva.
- Se instala un DatabaseSessionManager en app.state apuntando a esa base,
  de modo que la dependencia real get_db() se ejecuta en cada petición.
- SQLite no aplica claves foráneas por defecto, igual que la API no valida
  brand_id al crear productos.
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from beautyshop.db.database import DatabaseSessionManager
from beautyshop.db.models.brand_model import Brand
from beautyshop.db.models.category_model import Category
from beautyshop.db.models.product_model import Product
from beautyshop.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_manager(test_engine):
    """Gestor real construido sobre el motor de test (sin argumentos de pool)."""
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False, autoflush=False,
    )
    await manager.create_tables()
    return manager


@pytest.fixture
async def test_db(db_manager):
    async with db_manager._session_factory() as session:
        yield session


@pytest.fixture
async def client(db_manager):
    """Cliente HTTP con el gestor de test instalado en app.state."""
    original = getattr(app.state, "db_manager", None)
    app.state.db_manager = db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.state.db_manager = original


@pytest.fixture
async def seed_catalog(test_db):
    """
    Inserta un catálogo pequeño:

    - Hair Products: Silk Roots (Repair Shampoo, Leave-in Mask)
    - Accessories: Brushworks (Kabuki Brush)
    - Skin Care Products: Glow Lab (Hydrating Serum), Pure Derm (Night Cream)
    - Seasonal: Holiday Co (Gift Box), fuera de la lista de preferencia
    """
    hair = Category(name="Hair Products")
    accessories = Category(name="Accessories")
    skin = Category(name="Skin Care Products")
    seasonal = Category(name="Seasonal")
    test_db.add_all([hair, accessories, skin, seasonal])
    await test_db.flush()

    silk = Brand(name="Silk Roots", category_id=hair.id)
    brushworks = Brand(name="Brushworks", category_id=accessories.id)
    glow = Brand(name="Glow Lab", category_id=skin.id)
    pure = Brand(name="Pure Derm", category_id=skin.id)
    holiday = Brand(name="Holiday Co", category_id=seasonal.id)
    test_db.add_all([silk, brushworks, glow, pure, holiday])
    await test_db.flush()

    products = [
        Product(title="Repair Shampoo", price=12, image_url="https://cdn.test/shampoo.jpg", brand_id=silk.id, info="250 ml"),
        Product(title="Kabuki Brush", price=8.25, image_url="https://cdn.test/brush.jpg", brand_id=brushworks.id, info="Vegan"),
        Product(title="Hydrating Serum", price=19.5, image_url="https://cdn.test/serum.jpg", brand_id=glow.id, info="30 ml"),
        Product(title="Leave-in Mask", price=15, image_url="https://cdn.test/mask.jpg", brand_id=silk.id, info="150 ml"),
        Product(title="Night Cream", price=24.99, image_url="https://cdn.test/cream.jpg", brand_id=pure.id, info="50 ml"),
        Product(title="Gift Box", price=40, image_url="https://cdn.test/gift.jpg", brand_id=holiday.id, info="Limited"),
    ]
    # Inserción fila a fila para fijar el orden de primera aparición
    for product in products:
        test_db.add(product)
        await test_db.flush()
    await test_db.commit()

    return {
        "categories": {c.name: c.id for c in (hair, accessories, skin, seasonal)},
        "brands": {b.name: b.id for b in (silk, brushworks, glow, pure, holiday)},
        "products": {p.title: p.id for p in products},
    }
