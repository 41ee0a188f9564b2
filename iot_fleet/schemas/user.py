from enum import Enum
from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import datetime

class UserRole(str, Enum):
    ADMIN = "admin"
    TECHNICIAN = "technician"
    VIEWER = "viewer"

class UserBase(BaseModel):
    name: str
    email: str
    role: UserRole = UserRole.VIEWER

class UserCreate(UserBase):
    password: str

    class Config:
        use_enum_values = True
        validate_default = True

class UserUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[UserRole] = None

    class Config:
        use_enum_values = True

    @field_validator("name", "email", "password", "role")
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value

class UserResponse(UserBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    
    class Config:
        from_attributes = True
