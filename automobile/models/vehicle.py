from sqlalchemy import BigInteger, Boolean, CheckConstraint, Column, Float, Integer, String

from automobile.database import Base


class VehicleRecord(Base):
    __tablename__ = "vehicles"
    __table_args__ = (
        # electric vehicles have no tank, combustion vehicles no battery or range
        CheckConstraint(
            "(is_electric AND tank_capacity IS NULL)"
            " OR (NOT is_electric AND battery_capacity IS NULL AND autonomy IS NULL)",
            name="ck_vehicles_powertrain_fields",
        ),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    brand = Column(String, nullable=False)
    model = Column(String, nullable=False)
    manufacturing_year = Column(Integer, nullable=False)
    purchase_date = Column(BigInteger, nullable=False)
    is_electric = Column(Boolean, nullable=False)
    battery_capacity = Column(Float, nullable=True)
    autonomy = Column(Float, nullable=True)
    tank_capacity = Column(Float, nullable=True)
