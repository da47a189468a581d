from dataclasses import dataclass

from automobile.dao import (
    AccidentDao,
    DisplacementDao,
    InsuranceDao,
    MaintenanceDao,
    MaintenanceReminderDao,
    RechargeDao,
    VehicleDao,
)
from automobile.database import Database
from automobile.domain.repositories import (
    AccidentRepository,
    DisplacementRepository,
    GarageRepository,
    InsuranceRepository,
    MaintenanceReminderRepository,
    MaintenanceRepository,
    RechargeRepository,
)
from automobile.repositories.garage import SqlGarageRepository
from automobile.repositories.records import (
    SqlAccidentRepository,
    SqlDisplacementRepository,
    SqlInsuranceRepository,
    SqlMaintenanceReminderRepository,
    SqlMaintenanceRepository,
    SqlRechargeRepository,
    SqlRecordRepository,
)


@dataclass
class Repositories:
    """The repositories wired at startup and shared by every request."""

    garage: GarageRepository
    accidents: AccidentRepository
    insurance: InsuranceRepository
    maintenance: MaintenanceRepository
    reminders: MaintenanceReminderRepository
    recharges: RechargeRepository
    displacements: DisplacementRepository

    @classmethod
    def from_database(cls, database: Database) -> "Repositories":
        return cls(
            garage=SqlGarageRepository(VehicleDao(database)),
            accidents=SqlAccidentRepository(AccidentDao(database)),
            insurance=SqlInsuranceRepository(InsuranceDao(database)),
            maintenance=SqlMaintenanceRepository(MaintenanceDao(database)),
            reminders=SqlMaintenanceReminderRepository(MaintenanceReminderDao(database)),
            recharges=SqlRechargeRepository(RechargeDao(database)),
            displacements=SqlDisplacementRepository(DisplacementDao(database)),
        )


__all__ = [
    "Repositories",
    "SqlGarageRepository",
    "SqlRecordRepository",
    "SqlAccidentRepository",
    "SqlInsuranceRepository",
    "SqlMaintenanceRepository",
    "SqlMaintenanceReminderRepository",
    "SqlRechargeRepository",
    "SqlDisplacementRepository",
]
