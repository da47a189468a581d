import logging
from typing import Generic, TypeVar

from sqlalchemy import select

from automobile.database import Database

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


class VehicleScopedDao(Generic[RecordT]):
    """Insert and per-vehicle lookup for a table that belongs to a vehicle."""

    record_class: type[RecordT]

    def __init__(self, database: Database) -> None:
        self._db = database

    @property
    def table(self) -> str:
        return self.record_class.__tablename__

    async def insert(self, record: RecordT) -> int:
        """Persist ``record`` and return its new id.

        Raises ``IntegrityError`` if ``record.vehicle_id`` does not exist.
        """
        async with self._db.session() as session:
            session.add(record)
            await session.commit()
        logger.debug("Inserted %s %s for vehicle %s", self.table, record.id, record.vehicle_id)
        self._db.tracker.notify(self.table)
        return record.id

    async def get_by_vehicle(self, vehicle_id: int) -> list[RecordT]:
        async with self._db.session() as session:
            result = await session.execute(
                select(self.record_class).where(self.record_class.vehicle_id == vehicle_id)
            )
            return list(result.scalars().all())
