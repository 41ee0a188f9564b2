from .user_service import UserService
from .zone_service import ZoneService
from .device_service import DeviceService
from .sensor_service import SensorService
from .reading_service import ReadingService

__all__ = [
    "UserService",
    "ZoneService",
    "DeviceService",
    "SensorService",
    "ReadingService"
]
