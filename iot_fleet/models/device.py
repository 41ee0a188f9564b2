from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Table
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from iot_fleet.database import Base

device_sensors = Table(
    "device_sensors",
    Base.metadata,
    Column("device_id", Integer, ForeignKey("devices.id"), primary_key=True),
    Column("sensor_id", Integer, ForeignKey("sensors.id"), primary_key=True),
)

class Device(Base):
    __tablename__ = "devices"
    
    id = Column(Integer, primary_key=True, index=True)
    serial_number = Column(String, unique=True, index=True, nullable=False)
    model = Column(String)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    zone_id = Column(Integer, ForeignKey("zones.id"), nullable=False)
    installed_at = Column(DateTime(timezone=True))
    status = Column(String, nullable=False, default="active")  # "active", "maintenance", "offline"
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
    
    owner = relationship("User", back_populates="devices")
    zone = relationship("Zone", back_populates="devices")
    sensors = relationship("Sensor", secondary=device_sensors, back_populates="devices")

    @property
    def sensor_ids(self):
        return sorted(sensor.id for sensor in self.sensors)
