from automobile.models.vehicle import VehicleRecord
from automobile.models.accident import AccidentRecord
from automobile.models.insurance import InsuranceRecord
from automobile.models.maintenance import MaintenanceRecord, MaintenanceReminderRecord
from automobile.models.recharge import RechargeRecord
from automobile.models.displacement import DisplacementRecord

__all__ = [
    "VehicleRecord",
    "AccidentRecord",
    "InsuranceRecord",
    "MaintenanceRecord",
    "MaintenanceReminderRecord",
    "RechargeRecord",
    "DisplacementRecord",
]
