"""Repository contracts used by the services and the HTTP layer."""
from collections.abc import AsyncIterator
from typing import Protocol, TypeVar

from automobile.domain.models import (
    Accident,
    Displacement,
    Insurance,
    Maintenance,
    MaintenanceReminder,
    Recharge,
    Vehicle,
)

RecordT = TypeVar("RecordT")


class RecordRepository(Protocol[RecordT]):
    async def add(self, record: RecordT) -> int: ...

    async def get_by_vehicle(self, vehicle_id: int) -> list[RecordT]: ...


AccidentRepository = RecordRepository[Accident]
InsuranceRepository = RecordRepository[Insurance]
MaintenanceRepository = RecordRepository[Maintenance]
MaintenanceReminderRepository = RecordRepository[MaintenanceReminder]
RechargeRepository = RecordRepository[Recharge]
DisplacementRepository = RecordRepository[Displacement]


class GarageRepository(Protocol):
    def get_vehicles(self) -> AsyncIterator[list[Vehicle]]:
        """Live vehicle list: one snapshot now, then one per change."""
        ...

    async def add_vehicle(self, vehicle: Vehicle) -> int: ...

    async def update_vehicle(self, vehicle: Vehicle) -> None: ...

    async def delete_vehicle(self, vehicle_id: int) -> None: ...

    async def get_vehicle_by_id(self, vehicle_id: int) -> Vehicle | None: ...
