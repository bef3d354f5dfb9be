from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from .common import Address, CarespaceModel, EntityBase, RequestModel, UserRole


class UserProfile(CarespaceModel):
    phone: Optional[str] = None
    date_of_birth: Optional[datetime] = None
    gender: Optional[str] = None
    address: Optional[Address] = None
    avatar_url: Optional[str] = None
    bio: Optional[str] = None
    specialization: Optional[str] = None
    license_number: Optional[str] = None


class User(EntityBase):
    email: str
    name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: Optional[UserRole] = None
    is_active: bool = True
    last_login: Optional[datetime] = None
    profile: Optional[UserProfile] = None

    @property
    def full_name(self) -> str:
        if self.name:
            return self.name
        parts = [p for p in (self.first_name, self.last_name) if p]
        return " ".join(parts)


class CreateUserRequest(RequestModel):
    email: str
    first_name: str
    last_name: str
    role: UserRole = UserRole.PATIENT
    password: Optional[str] = None
    profile: Optional[UserProfile] = None


class UpdateUserRequest(RequestModel):
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: Optional[UserRole] = None
    is_active: Optional[bool] = None
    profile: Optional[UserProfile] = None


class UserSettings(CarespaceModel):
    notifications_enabled: Optional[bool] = None
    email_notifications: Optional[bool] = None
    language: Optional[str] = None
    timezone: Optional[str] = None
    preferences: dict[str, Any] = Field(default_factory=dict)
