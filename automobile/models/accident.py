from sqlalchemy import BigInteger, Column, ForeignKey, Integer, String

from automobile.database import Base


class AccidentRecord(Base):
    __tablename__ = "accidents"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False, index=True)
    date = Column(BigInteger, nullable=False)
    description = Column(String, nullable=False)
    location = Column(String, nullable=False)
