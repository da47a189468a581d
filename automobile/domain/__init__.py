from automobile.domain.models import (
    Accident,
    Displacement,
    Insurance,
    Maintenance,
    MaintenanceReminder,
    Recharge,
    Vehicle,
)

__all__ = [
    "Vehicle",
    "Accident",
    "Insurance",
    "Maintenance",
    "MaintenanceReminder",
    "Recharge",
    "Displacement",
]
