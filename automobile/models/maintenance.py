from sqlalchemy import BigInteger, Column, Float, ForeignKey, Integer, String

from automobile.database import Base


class MaintenanceRecord(Base):
    __tablename__ = "maintenance"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False, index=True)
    description = Column(String, nullable=False)
    cost = Column(Float, nullable=False)
    date = Column(BigInteger, nullable=False)


class MaintenanceReminderRecord(Base):
    __tablename__ = "maintenance_reminders"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False, index=True)
    reminder_date = Column(BigInteger, nullable=False)
    description = Column(String, nullable=False)
