from automobile.dao.base import VehicleScopedDao
from automobile.dao.records import (
    AccidentDao,
    DisplacementDao,
    InsuranceDao,
    MaintenanceDao,
    MaintenanceReminderDao,
    RechargeDao,
)
from automobile.dao.vehicle import VehicleDao

__all__ = [
    "VehicleScopedDao",
    "VehicleDao",
    "AccidentDao",
    "InsuranceDao",
    "MaintenanceDao",
    "MaintenanceReminderDao",
    "RechargeDao",
    "DisplacementDao",
]
