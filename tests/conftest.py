from datetime import datetime, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from automobile.config import Settings
from automobile.database import Database
from automobile.domain.models import Vehicle
from automobile.main import create_app
from automobile.repositories import Repositories


def epoch_ms(*args) -> int:
    return int(datetime(*args, tzinfo=timezone.utc).timestamp() * 1000)


T1 = epoch_ms(2024, 6, 10)


def sqlite_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'test.sqlite3'}"


def make_settings(tmp_path, **overrides) -> Settings:
    values = {"database_url": sqlite_url(tmp_path), "data_dir": str(tmp_path), "api_key": ""}
    values.update(overrides)
    return Settings(**values)


@pytest_asyncio.fixture
async def database(tmp_path):
    db = Database(sqlite_url(tmp_path))
    await db.create_tables()
    yield db
    await db.dispose()


@pytest.fixture
def repositories(database):
    return Repositories.from_database(database)


@pytest.fixture
def corolla():
    return Vehicle(
        brand="Toyota", model="Corolla", manufacturing_year=2020,
        purchase_date=T1, is_electric=False, tank_capacity=50.0,
    )


@pytest.fixture
def model_3():
    return Vehicle(
        brand="Tesla", model="Model 3", manufacturing_year=2022,
        purchase_date=T1, is_electric=True, battery_capacity=75.0, autonomy=500.0,
    )


@pytest_asyncio.fixture
async def app(tmp_path):
    app = create_app(make_settings(tmp_path))
    await app.state.database.create_tables()
    yield app
    await app.state.database.dispose()


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
