from sqlalchemy import BigInteger, Column, Float, ForeignKey, Integer, String

from automobile.database import Base


class InsuranceRecord(Base):
    __tablename__ = "insurance"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False, index=True)
    insurer = Column(String, nullable=False)
    # policy numbers are not unique
    policy_number = Column(String, nullable=False)
    assistance_details = Column(String, nullable=False)
    start_date = Column(BigInteger, nullable=True)
    end_date = Column(BigInteger, nullable=True)
    cost = Column(Float, nullable=False, default=0.0)
