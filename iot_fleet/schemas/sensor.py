from enum import Enum
from pydantic import BaseModel, field_validator
from datetime import datetime
from typing import Any, Optional

class SensorType(str, Enum):
    TEMPERATURE = "temperature"
    HUMIDITY = "humidity"
    CO2 = "co2"
    NOISE = "noise"

class SensorUnit(str, Enum):
    CELSIUS = "°C"
    PERCENT = "%"
    PPM = "ppm"
    DECIBEL = "dB"

class SensorBase(BaseModel):
    type: SensorType
    unit: SensorUnit
    model: Optional[str] = None
    location: Optional[str] = None
    is_active: bool = True

class SensorCreate(SensorBase):
    class Config:
        use_enum_values = True

class SensorUpdate(BaseModel):
    type: Optional[SensorType] = None
    unit: Optional[SensorUnit] = None
    model: Optional[str] = None
    location: Optional[str] = None
    is_active: Optional[bool] = None

    class Config:
        use_enum_values = True

    @field_validator("type", "unit", "is_active")
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value

class SensorResponse(SensorBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    
    class Config:
        from_attributes = True

# value and time stay untyped here: the reading service applies the
# numeric and date checks so they surface as domain errors
class ReadingCreate(BaseModel):
    sensor_id: int
    value: Any
    time: Any = None

class ReadingUpdate(BaseModel):
    sensor_id: Optional[int] = None
    value: Any = None
    # null or "" time counts as "not supplied" and leaves the stored time alone
    time: Any = None

    @field_validator("sensor_id", "value")
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value

class ReadingResponse(BaseModel):
    id: int
    sensor_id: int
    value: float
    time: Optional[datetime] = None
    
    class Config:
        from_attributes = True
