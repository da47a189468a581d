"""Per-vehicle usage and cost statistics."""
import calendar
import logging
from datetime import datetime, timezone

from pydantic import BaseModel

from automobile.domain.models import Accident, Maintenance
from automobile.domain.repositories import (
    AccidentRepository,
    DisplacementRepository,
    InsuranceRepository,
    MaintenanceRepository,
    RechargeRepository,
)

logger = logging.getLogger(__name__)

REPORT_MONTHS = 6
RECENT_ITEMS = 3


class MonthlyDistance(BaseModel):
    month: str
    year: int
    distance: float


class VehicleReport(BaseModel):
    vehicle_id: int
    total_distance: float
    distance_by_month: list[MonthlyDistance]
    total_recharge_cost: float
    total_maintenance_cost: float
    total_insurance_cost: float
    total_cost: float
    cost_per_km: float
    recent_accidents: list[Accident]
    recent_maintenance: list[Maintenance]


def month_window(now: datetime, months: int = REPORT_MONTHS) -> list[tuple[int, int]]:
    """(year, month) pairs for the ``months`` calendar months ending at ``now``, oldest first."""
    year, month = now.year, now.month
    window = []
    for _ in range(months):
        window.append((year, month))
        month -= 1
        if month == 0:
            year, month = year - 1, 12
    window.reverse()
    return window


def _year_month(epoch_ms: int) -> tuple[int, int] | None:
    try:
        moment = datetime.fromtimestamp(epoch_ms / 1000, tz=timezone.utc)
    except (ValueError, OverflowError, OSError):
        logger.warning("Skipping unrepresentable date %s", epoch_ms)
        return None
    return moment.year, moment.month


class ReportsService:
    def __init__(
        self,
        displacements: DisplacementRepository,
        recharges: RechargeRepository,
        maintenance: MaintenanceRepository,
        insurance: InsuranceRepository,
        accidents: AccidentRepository,
    ) -> None:
        self._displacements = displacements
        self._recharges = recharges
        self._maintenance = maintenance
        self._insurance = insurance
        self._accidents = accidents

    async def vehicle_report(self, vehicle_id: int, now: datetime | None = None) -> VehicleReport:
        now = now or datetime.now(timezone.utc)

        displacements = await self._displacements.get_by_vehicle(vehicle_id)
        total_distance = sum(d.distance for d in displacements)

        buckets = {key: 0.0 for key in month_window(now)}
        for displacement in displacements:
            key = _year_month(displacement.date)
            if key in buckets:
                buckets[key] += displacement.distance

        recharges = await self._recharges.get_by_vehicle(vehicle_id)
        maintenance = await self._maintenance.get_by_vehicle(vehicle_id)
        insurance = await self._insurance.get_by_vehicle(vehicle_id)
        accidents = await self._accidents.get_by_vehicle(vehicle_id)

        total_recharges = sum(r.cost for r in recharges)
        total_maintenance = sum(m.cost for m in maintenance)
        total_insurance = sum(i.cost for i in insurance)
        total_cost = total_recharges + total_maintenance + total_insurance

        report = VehicleReport(
            vehicle_id=vehicle_id,
            total_distance=total_distance,
            distance_by_month=[
                MonthlyDistance(month=calendar.month_abbr[month], year=year, distance=distance)
                for (year, month), distance in buckets.items()
            ],
            total_recharge_cost=total_recharges,
            total_maintenance_cost=total_maintenance,
            total_insurance_cost=total_insurance,
            total_cost=total_cost,
            cost_per_km=total_cost / total_distance if total_distance else 0.0,
            recent_accidents=sorted(accidents, key=lambda a: a.date, reverse=True)[:RECENT_ITEMS],
            recent_maintenance=sorted(maintenance, key=lambda m: m.date, reverse=True)[:RECENT_ITEMS],
        )
        logger.debug("Report for vehicle %s: %.2f km, %.2f total cost", vehicle_id, total_distance, total_cost)
        return report
