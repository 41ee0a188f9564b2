from enum import Enum
from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import datetime

class DeviceStatus(str, Enum):
    ACTIVE = "active"
    MAINTENANCE = "maintenance"
    OFFLINE = "offline"

class DeviceBase(BaseModel):
    serial_number: str
    model: Optional[str] = None
    owner_id: int
    zone_id: int
    installed_at: Optional[datetime] = None
    status: DeviceStatus = DeviceStatus.ACTIVE

class DeviceCreate(DeviceBase):
    sensors: List[int] = []

    class Config:
        use_enum_values = True
        validate_default = True

class DeviceUpdate(BaseModel):
    serial_number: Optional[str] = None
    model: Optional[str] = None
    owner_id: Optional[int] = None
    zone_id: Optional[int] = None
    installed_at: Optional[datetime] = None
    status: Optional[DeviceStatus] = None
    sensors: Optional[List[int]] = None

    class Config:
        use_enum_values = True

    @field_validator("serial_number", "owner_id", "zone_id", "status", "sensors")
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value

class DeviceResponse(DeviceBase):
    id: int
    sensors: List[int] = Field(default_factory=list, validation_alias="sensor_ids")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    
    class Config:
        from_attributes = True
