import pytest
from sqlalchemy import func, inspect, select
from sqlalchemy.exc import IntegrityError

from automobile.database import SCHEMA_VERSION
from automobile.models import (
    AccidentRecord,
    InsuranceRecord,
    MaintenanceRecord,
    VehicleRecord,
)
from tests.conftest import T1

DEPENDENT_TABLES = [
    "accidents",
    "insurance",
    "maintenance",
    "maintenance_reminders",
    "recharges",
    "displacements",
]


def _vehicle(**overrides) -> VehicleRecord:
    values = dict(
        brand="Fiat", model="Panda", manufacturing_year=2015, purchase_date=T1,
        is_electric=False, tank_capacity=37.0,
    )
    values.update(overrides)
    return VehicleRecord(**values)


@pytest.mark.asyncio
async def test_all_tables_created(database):
    async with database.engine.connect() as conn:
        tables = await conn.run_sync(lambda sync_conn: set(inspect(sync_conn).get_table_names()))
    assert {"vehicles", *DEPENDENT_TABLES} <= tables


@pytest.mark.asyncio
@pytest.mark.parametrize("table", DEPENDENT_TABLES)
async def test_dependent_table_cascades_and_is_indexed(database, table):
    async with database.engine.connect() as conn:
        fks = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_foreign_keys(table))
        indexes = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_indexes(table))

    assert len(fks) == 1
    assert fks[0]["referred_table"] == "vehicles"
    assert fks[0]["referred_columns"] == ["id"]
    assert fks[0]["constrained_columns"] == ["vehicle_id"]
    assert fks[0]["options"].get("ondelete") == "CASCADE"
    assert any(ix["column_names"] == ["vehicle_id"] for ix in indexes)


@pytest.mark.asyncio
async def test_schema_version_recorded(database):
    async with database.engine.connect() as conn:
        result = await conn.exec_driver_sql("PRAGMA user_version")
        assert result.scalar() == SCHEMA_VERSION


@pytest.mark.asyncio
async def test_foreign_keys_enforced(database):
    async with database.session() as session:
        session.add(AccidentRecord(vehicle_id=42, date=T1, description="Dent", location="Vitoria"))
        with pytest.raises(IntegrityError):
            await session.commit()


@pytest.mark.asyncio
async def test_cascade_delete_removes_dependents(database):
    async with database.session() as session:
        vehicle = _vehicle()
        session.add(vehicle)
        await session.commit()
        session.add(MaintenanceRecord(vehicle_id=vehicle.id, description="Brakes", cost=120.0, date=T1))
        await session.commit()

        await session.delete(vehicle)
        await session.commit()

        count = await session.scalar(select(func.count()).select_from(MaintenanceRecord))
    assert count == 0


@pytest.mark.asyncio
async def test_ids_are_not_reused(database):
    async with database.session() as session:
        first = _vehicle()
        session.add(first)
        await session.commit()
        first_id = first.id

        await session.delete(first)
        await session.commit()

        second = _vehicle()
        session.add(second)
        await session.commit()

    assert second.id > first_id


@pytest.mark.asyncio
async def test_duplicate_policy_numbers_allowed(database):
    async with database.session() as session:
        vehicle = _vehicle()
        session.add(vehicle)
        await session.commit()
        for insurer in ("Porto", "Allianz"):
            session.add(InsuranceRecord(
                vehicle_id=vehicle.id, insurer=insurer, policy_number="P-001",
                assistance_details="24h towing",
            ))
        await session.commit()

        count = await session.scalar(select(func.count()).select_from(InsuranceRecord))
    assert count == 2


@pytest.mark.asyncio
async def test_insurance_cost_defaults_to_zero(database):
    async with database.session() as session:
        vehicle = _vehicle()
        session.add(vehicle)
        await session.commit()
        insurance = InsuranceRecord(
            vehicle_id=vehicle.id, insurer="Porto", policy_number="P-002", assistance_details="None",
        )
        session.add(insurance)
        await session.commit()

        result = await session.get(InsuranceRecord, insurance.id)
    assert result.cost == 0.0
    assert result.start_date is None
    assert result.end_date is None


@pytest.mark.asyncio
@pytest.mark.parametrize("overrides", [
    {"is_electric": True, "battery_capacity": 50.0, "tank_capacity": 40.0},
    {"is_electric": False, "tank_capacity": 40.0, "battery_capacity": 50.0},
    {"is_electric": False, "tank_capacity": 40.0, "autonomy": 300.0},
])
async def test_mixed_powertrain_row_rejected(database, overrides):
    async with database.session() as session:
        session.add(_vehicle(**overrides))
        with pytest.raises(IntegrityError):
            await session.commit()

    async with database.session() as session:
        count = await session.scalar(select(func.count()).select_from(VehicleRecord))
    assert count == 0
