"""Request bodies for records nested under a vehicle; the vehicle id comes from the path."""
from pydantic import BaseModel


class AccidentCreate(BaseModel):
    date: int
    description: str
    location: str


class InsuranceCreate(BaseModel):
    insurer: str
    policy_number: str
    assistance_details: str
    start_date: int | None = None
    end_date: int | None = None
    cost: float = 0.0


class MaintenanceCreate(BaseModel):
    description: str
    cost: float
    date: int


class MaintenanceReminderCreate(BaseModel):
    reminder_date: int
    description: str


class RechargeCreate(BaseModel):
    is_electric: bool
    amount: float
    cost: float
    date: int


class DisplacementCreate(BaseModel):
    distance: float
    date: int
    origin: str
    destination: str
