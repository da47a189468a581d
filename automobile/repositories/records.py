from typing import Generic, TypeVar

from pydantic import BaseModel

from automobile.dao import (
    AccidentDao,
    DisplacementDao,
    InsuranceDao,
    MaintenanceDao,
    MaintenanceReminderDao,
    RechargeDao,
    VehicleScopedDao,
)
from automobile.domain.models import (
    Accident,
    Displacement,
    Insurance,
    Maintenance,
    MaintenanceReminder,
    Recharge,
)

RecordT = TypeVar("RecordT", bound=BaseModel)


class SqlRecordRepository(Generic[RecordT]):
    """Maps one domain record type onto its DAO."""

    record_type: type[RecordT]

    def __init__(self, dao: VehicleScopedDao) -> None:
        self._dao = dao

    async def add(self, record: RecordT) -> int:
        row = self._dao.record_class(**record.model_dump(exclude={"id"}))
        return await self._dao.insert(row)

    async def get_by_vehicle(self, vehicle_id: int) -> list[RecordT]:
        rows = await self._dao.get_by_vehicle(vehicle_id)
        return [self.record_type.model_validate(row) for row in rows]


class SqlAccidentRepository(SqlRecordRepository[Accident]):
    record_type = Accident

    def __init__(self, dao: AccidentDao) -> None:
        super().__init__(dao)


class SqlInsuranceRepository(SqlRecordRepository[Insurance]):
    record_type = Insurance

    def __init__(self, dao: InsuranceDao) -> None:
        super().__init__(dao)


class SqlMaintenanceRepository(SqlRecordRepository[Maintenance]):
    record_type = Maintenance

    def __init__(self, dao: MaintenanceDao) -> None:
        super().__init__(dao)


class SqlMaintenanceReminderRepository(SqlRecordRepository[MaintenanceReminder]):
    record_type = MaintenanceReminder

    def __init__(self, dao: MaintenanceReminderDao) -> None:
        super().__init__(dao)


class SqlRechargeRepository(SqlRecordRepository[Recharge]):
    record_type = Recharge

    def __init__(self, dao: RechargeDao) -> None:
        super().__init__(dao)


class SqlDisplacementRepository(SqlRecordRepository[Displacement]):
    record_type = Displacement

    def __init__(self, dao: DisplacementDao) -> None:
        super().__init__(dao)
