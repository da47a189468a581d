from pydantic import BaseModel

from automobile.domain.models import Vehicle


class VehicleCreate(BaseModel):
    brand: str
    model: str
    manufacturing_year: int
    purchase_date: int
    is_electric: bool
    battery_capacity: float | None = None
    autonomy: float | None = None
    tank_capacity: float | None = None

    def to_domain(self, vehicle_id: int | None = None) -> Vehicle:
        return Vehicle(id=vehicle_id, **self.model_dump())
