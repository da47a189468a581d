from datetime import datetime, timezone

import pytest

from automobile.domain.models import Accident, Displacement, Insurance, Maintenance, Recharge
from automobile.services.reports import ReportsService, month_window
from tests.conftest import epoch_ms
from tests.fakes import (
    FakeAccidentRepository,
    FakeDisplacementRepository,
    FakeInsuranceRepository,
    FakeMaintenanceRepository,
    FakeRechargeRepository,
)

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def repos():
    return {
        "displacements": FakeDisplacementRepository(),
        "recharges": FakeRechargeRepository(),
        "maintenance": FakeMaintenanceRepository(),
        "insurance": FakeInsuranceRepository(),
        "accidents": FakeAccidentRepository(),
    }


@pytest.fixture
def service(repos):
    return ReportsService(**repos)


def _trip(distance: float, *when) -> Displacement:
    return Displacement(vehicle_id=1, distance=distance, date=epoch_ms(*when), origin="A", destination="B")


def test_month_window_crosses_year_boundary():
    window = month_window(datetime(2024, 2, 1, tzinfo=timezone.utc))
    assert window == [(2023, 9), (2023, 10), (2023, 11), (2023, 12), (2024, 1), (2024, 2)]


@pytest.mark.asyncio
async def test_empty_report(service):
    report = await service.vehicle_report(1, now=NOW)

    assert report.total_distance == 0
    assert report.total_cost == 0
    assert report.cost_per_km == 0
    assert [m.month for m in report.distance_by_month] == ["Jan", "Feb", "Mar", "Apr", "May", "Jun"]
    assert all(m.distance == 0 for m in report.distance_by_month)
    assert report.recent_accidents == []
    assert report.recent_maintenance == []


@pytest.mark.asyncio
async def test_distance_by_month(repos, service):
    for trip in (
        _trip(100.0, 2024, 6, 1),
        _trip(50.0, 2024, 1, 20),
        _trip(30.0, 2023, 12, 31),  # before the window
        _trip(20.0, 2023, 6, 10),   # same month, previous year
    ):
        await repos["displacements"].add(trip)
    await repos["displacements"].add(
        Displacement(vehicle_id=2, distance=999.0, date=epoch_ms(2024, 6, 2), origin="A", destination="B")
    )

    report = await service.vehicle_report(1, now=NOW)

    assert report.total_distance == 200.0
    assert [(m.month, m.year, m.distance) for m in report.distance_by_month] == [
        ("Jan", 2024, 50.0),
        ("Feb", 2024, 0.0),
        ("Mar", 2024, 0.0),
        ("Apr", 2024, 0.0),
        ("May", 2024, 0.0),
        ("Jun", 2024, 100.0),
    ]


@pytest.mark.asyncio
async def test_costs_and_recent_items(repos, service):
    await repos["displacements"].add(_trip(200.0, 2024, 5, 1))
    for cost in (40.0, 60.0):
        await repos["recharges"].add(
            Recharge(vehicle_id=1, is_electric=False, amount=20.0, cost=cost, date=epoch_ms(2024, 5, 2))
        )
    for day, cost in ((1, 75.5), (2, 24.5), (3, 100.0), (4, 50.0)):
        await repos["maintenance"].add(
            Maintenance(vehicle_id=1, description=f"Service {day}", cost=cost, date=epoch_ms(2024, 4, day))
        )
    await repos["insurance"].add(
        Insurance(vehicle_id=1, insurer="Porto", policy_number="P-1", assistance_details="24h", cost=150.0)
    )
    for day in (10, 20):
        await repos["accidents"].add(
            Accident(vehicle_id=1, date=epoch_ms(2024, 3, day), description=f"Scratch {day}", location="Garage")
        )

    report = await service.vehicle_report(1, now=NOW)

    assert report.total_recharge_cost == 100.0
    assert report.total_maintenance_cost == 250.0
    assert report.total_insurance_cost == 150.0
    assert report.total_cost == 500.0
    assert report.cost_per_km == 2.5
    assert [m.description for m in report.recent_maintenance] == ["Service 4", "Service 3", "Service 2"]
    assert [a.description for a in report.recent_accidents] == ["Scratch 20", "Scratch 10"]


@pytest.mark.asyncio
async def test_unrepresentable_trip_date_counts_only_in_total(repos, service):
    await repos["displacements"].add(_trip(100.0, 2024, 6, 1))
    await repos["displacements"].add(
        Displacement(vehicle_id=1, distance=40.0, date=253402300800000, origin="A", destination="B")
    )

    report = await service.vehicle_report(1, now=NOW)

    assert report.total_distance == 140.0
    assert sum(m.distance for m in report.distance_by_month) == 100.0
