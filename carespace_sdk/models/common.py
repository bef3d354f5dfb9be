"""Envelopes, shared value objects and enums used across resources."""

from datetime import datetime
from enum import Enum
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class CarespaceModel(BaseModel):
    """Base for wire models: unknown fields are kept, not rejected."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class RequestModel(BaseModel):
    """Base for request bodies; typos in field names fail early."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class ApiResponse(CarespaceModel, Generic[T]):
    """Standard ``{success, data, error, message}`` envelope."""

    success: bool = True
    data: Optional[T] = None
    error: Optional[str] = None
    message: Optional[str] = None


class PaginatedResponse(CarespaceModel, Generic[T]):
    """Envelope for list endpoints."""

    success: bool = True
    data: list[T] = Field(default_factory=list)
    error: Optional[str] = None
    message: Optional[str] = None
    page: int = 1
    limit: int = 20
    total: int = 0
    total_pages: int = 0
    has_next: bool = False
    has_previous: bool = False


class EntityBase(CarespaceModel):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserRole(str, Enum):
    ADMIN = "admin"
    PROVIDER = "provider"
    PATIENT = "patient"


class ProgramCategory(str, Enum):
    REHABILITATION = "rehabilitation"
    FITNESS = "fitness"
    THERAPY = "therapy"
    WELLNESS = "wellness"


class ProgramDifficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Address(CarespaceModel):
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None


class EmergencyContact(CarespaceModel):
    name: str
    phone: str
    relationship: Optional[str] = None


class MedicalInfo(CarespaceModel):
    allergies: list[str] = Field(default_factory=list)
    medications: list[str] = Field(default_factory=list)
    conditions: list[str] = Field(default_factory=list)
    notes: Optional[str] = None
