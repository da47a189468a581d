from sqlalchemy import BigInteger, Boolean, Column, Float, ForeignKey, Integer

from automobile.database import Base


class RechargeRecord(Base):
    __tablename__ = "recharges"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False, index=True)
    is_electric = Column(Boolean, nullable=False)
    amount = Column(Float, nullable=False)  # litres or kWh
    cost = Column(Float, nullable=False)
    date = Column(BigInteger, nullable=False)
