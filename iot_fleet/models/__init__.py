from iot_fleet.database import Base
from .user import User
from .zone import Zone
from .device import Device, device_sensors
from .sensor import Sensor, Reading

__all__ = [
    "Base",
    "User",
    "Zone",
    "Device",
    "device_sensors",
    "Sensor",
    "Reading"
]
