from .user import UserResponse, UserCreate, UserUpdate
from .zone import ZoneResponse, ZoneCreate, ZoneUpdate
from .device import DeviceResponse, DeviceCreate, DeviceUpdate
from .sensor import (
    SensorResponse, SensorCreate, SensorUpdate,
    ReadingResponse, ReadingCreate, ReadingUpdate,
)

__all__ = [
    "UserResponse",
    "UserCreate",
    "UserUpdate",
    "ZoneResponse",
    "ZoneCreate",
    "ZoneUpdate",
    "DeviceResponse",
    "DeviceCreate",
    "DeviceUpdate",
    "SensorResponse",
    "SensorCreate",
    "SensorUpdate",
    "ReadingResponse",
    "ReadingCreate",
    "ReadingUpdate"
]
