from automobile.dao.base import VehicleScopedDao
from automobile.models import (
    AccidentRecord,
    DisplacementRecord,
    InsuranceRecord,
    MaintenanceRecord,
    MaintenanceReminderRecord,
    RechargeRecord,
)


class AccidentDao(VehicleScopedDao[AccidentRecord]):
    record_class = AccidentRecord


class InsuranceDao(VehicleScopedDao[InsuranceRecord]):
    record_class = InsuranceRecord


class MaintenanceDao(VehicleScopedDao[MaintenanceRecord]):
    record_class = MaintenanceRecord


class MaintenanceReminderDao(VehicleScopedDao[MaintenanceReminderRecord]):
    record_class = MaintenanceReminderRecord


class RechargeDao(VehicleScopedDao[RechargeRecord]):
    record_class = RechargeRecord


class DisplacementDao(VehicleScopedDao[DisplacementRecord]):
    record_class = DisplacementRecord
