from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import (
    Address,
    CarespaceModel,
    EmergencyContact,
    EntityBase,
    MedicalInfo,
    RequestModel,
)


class Client(EntityBase):
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    date_of_birth: Optional[datetime] = None
    gender: Optional[str] = None
    address: Optional[Address] = None
    emergency_contact: Optional[EmergencyContact] = None
    medical_info: Optional[MedicalInfo] = None
    assigned_programs: list[str] = Field(default_factory=list)
    provider_id: Optional[str] = None
    is_active: bool = True
    last_session: Optional[datetime] = None
    total_sessions: int = 0
    notes: Optional[str] = None


class CreateClientRequest(RequestModel):
    name: str
    email: str
    phone: Optional[str] = None
    date_of_birth: Optional[datetime] = None
    gender: Optional[str] = None
    address: Optional[Address] = None
    emergency_contact: Optional[EmergencyContact] = None
    medical_info: Optional[MedicalInfo] = None
    provider_id: Optional[str] = None
    notes: Optional[str] = None


class UpdateClientRequest(RequestModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    date_of_birth: Optional[datetime] = None
    gender: Optional[str] = None
    address: Optional[Address] = None
    emergency_contact: Optional[EmergencyContact] = None
    medical_info: Optional[MedicalInfo] = None
    is_active: Optional[bool] = None
    notes: Optional[str] = None


class ClientStats(CarespaceModel):
    total_sessions: int = 0
    total_exercises: int = 0
    total_time: int = 0
    last_session: Optional[datetime] = None
    average_score: Optional[float] = None
    completion_rate: float = 0.0
    progress_trend: Optional[str] = None
