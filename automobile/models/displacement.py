from sqlalchemy import BigInteger, Column, Float, ForeignKey, Integer, String

from automobile.database import Base


class DisplacementRecord(Base):
    __tablename__ = "displacements"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False, index=True)
    distance = Column(Float, nullable=False)
    date = Column(BigInteger, nullable=False)
    origin = Column(String, nullable=False)
    destination = Column(String, nullable=False)
