"""Plain value objects handed to and returned by the repositories.

Dates are epoch milliseconds. ``id`` is ``None`` until the store assigns one.
"""
from pydantic import BaseModel, model_validator


class Vehicle(BaseModel):
    id: int | None = None
    brand: str
    model: str
    manufacturing_year: int
    purchase_date: int
    is_electric: bool
    battery_capacity: float | None = None
    autonomy: float | None = None
    tank_capacity: float | None = None

    model_config = {"from_attributes": True, "frozen": True}

    @model_validator(mode="after")
    def check_powertrain_fields(self) -> "Vehicle":
        if self.is_electric and self.tank_capacity is not None:
            raise ValueError("electric vehicles have no tank capacity")
        if not self.is_electric and (self.battery_capacity is not None or self.autonomy is not None):
            raise ValueError("combustion vehicles have no battery capacity or autonomy")
        return self


class Accident(BaseModel):
    id: int | None = None
    vehicle_id: int
    date: int
    description: str
    location: str

    model_config = {"from_attributes": True, "frozen": True}


class Insurance(BaseModel):
    id: int | None = None
    vehicle_id: int
    insurer: str
    policy_number: str
    assistance_details: str
    start_date: int | None = None
    end_date: int | None = None
    cost: float = 0.0

    model_config = {"from_attributes": True, "frozen": True}


class Maintenance(BaseModel):
    id: int | None = None
    vehicle_id: int
    description: str
    cost: float
    date: int

    model_config = {"from_attributes": True, "frozen": True}


class MaintenanceReminder(BaseModel):
    id: int | None = None
    vehicle_id: int
    reminder_date: int
    description: str

    model_config = {"from_attributes": True, "frozen": True}


class Recharge(BaseModel):
    id: int | None = None
    vehicle_id: int
    is_electric: bool
    amount: float
    cost: float
    date: int

    model_config = {"from_attributes": True, "frozen": True}


class Displacement(BaseModel):
    """A single trip."""

    id: int | None = None
    vehicle_id: int
    distance: float
    date: int
    origin: str
    destination: str

    model_config = {"from_attributes": True, "frozen": True}
