import logging
from collections.abc import AsyncIterator

from sqlalchemy import delete, select, update

from automobile.database import Database
from automobile.models import VehicleRecord

logger = logging.getLogger(__name__)

TABLE = VehicleRecord.__tablename__
_MUTABLE_COLUMNS = [c.key for c in VehicleRecord.__table__.columns if c.key != "id"]


class VehicleDao:
    def __init__(self, database: Database) -> None:
        self._db = database

    async def insert(self, vehicle: VehicleRecord) -> int:
        async with self._db.session() as session:
            session.add(vehicle)
            await session.commit()
        logger.debug("Inserted vehicle %s", vehicle.id)
        self._db.tracker.notify(TABLE)
        return vehicle.id

    async def update(self, vehicle: VehicleRecord) -> None:
        """Replace the stored row with the same id. Unknown ids are ignored."""
        values = {key: getattr(vehicle, key) for key in _MUTABLE_COLUMNS}
        async with self._db.session() as session:
            result = await session.execute(
                update(VehicleRecord).where(VehicleRecord.id == vehicle.id).values(**values)
            )
            await session.commit()
        if result.rowcount:
            logger.debug("Updated vehicle %s", vehicle.id)
            self._db.tracker.notify(TABLE)

    async def delete(self, vehicle: VehicleRecord) -> None:
        await self.delete_by_id(vehicle.id)

    async def delete_by_id(self, vehicle_id: int) -> None:
        # dependents go with it through ON DELETE CASCADE
        async with self._db.session() as session:
            result = await session.execute(delete(VehicleRecord).where(VehicleRecord.id == vehicle_id))
            await session.commit()
        if result.rowcount:
            logger.debug("Deleted vehicle %s", vehicle_id)
            self._db.tracker.notify(TABLE)

    async def get_by_id(self, vehicle_id: int) -> VehicleRecord | None:
        async with self._db.session() as session:
            return await session.get(VehicleRecord, vehicle_id)

    async def _snapshot(self) -> list[VehicleRecord]:
        async with self._db.session() as session:
            result = await session.execute(select(VehicleRecord))
            return list(result.scalars().all())

    async def get_all(self) -> AsyncIterator[list[VehicleRecord]]:
        """Yield the full vehicle list now and again after every change.

        Runs until the consumer closes the iterator or is cancelled.
        """
        changed = self._db.tracker.subscribe(TABLE)
        try:
            while True:
                changed.clear()
                yield await self._snapshot()
                await changed.wait()
        finally:
            self._db.tracker.unsubscribe(TABLE, changed)
