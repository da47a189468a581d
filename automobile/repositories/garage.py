from collections.abc import AsyncIterator
from contextlib import aclosing

from automobile.dao import VehicleDao
from automobile.domain.models import Vehicle
from automobile.models import VehicleRecord


def to_domain(record: VehicleRecord) -> Vehicle:
    return Vehicle.model_validate(record)


def to_record(vehicle: Vehicle) -> VehicleRecord:
    return VehicleRecord(**vehicle.model_dump())


class SqlGarageRepository:
    def __init__(self, dao: VehicleDao) -> None:
        self._dao = dao

    async def get_vehicles(self) -> AsyncIterator[list[Vehicle]]:
        async with aclosing(self._dao.get_all()) as snapshots:
            async for records in snapshots:
                yield [to_domain(r) for r in records]

    async def add_vehicle(self, vehicle: Vehicle) -> int:
        return await self._dao.insert(to_record(vehicle.model_copy(update={"id": None})))

    async def update_vehicle(self, vehicle: Vehicle) -> None:
        await self._dao.update(to_record(vehicle))

    async def delete_vehicle(self, vehicle_id: int) -> None:
        await self._dao.delete_by_id(vehicle_id)

    async def get_vehicle_by_id(self, vehicle_id: int) -> Vehicle | None:
        record = await self._dao.get_by_id(vehicle_id)
        return to_domain(record) if record is not None else None
