"""Typed request and response models mirroring the wire JSON."""

from .auth import (
    ChangePasswordRequest,
    ForgotPasswordRequest,
    LoginRequest,
    LoginResponse,
    LogoutRequest,
    RefreshTokenRequest,
    ResetPasswordRequest,
)
from .clients import Client, ClientStats, CreateClientRequest, UpdateClientRequest
from .common import (
    Address,
    ApiResponse,
    CarespaceModel,
    EmergencyContact,
    EntityBase,
    MedicalInfo,
    PaginatedResponse,
    ProgramCategory,
    ProgramDifficulty,
    RequestModel,
    UserRole,
)
from .programs import (
    CreateExerciseRequest,
    CreateProgramRequest,
    Exercise,
    Program,
    UpdateProgramRequest,
)
from .users import (
    CreateUserRequest,
    UpdateUserRequest,
    User,
    UserProfile,
    UserSettings,
)

__all__ = [
    "ApiResponse",
    "PaginatedResponse",
    "CarespaceModel",
    "RequestModel",
    "EntityBase",
    "UserRole",
    "ProgramCategory",
    "ProgramDifficulty",
    "Address",
    "EmergencyContact",
    "MedicalInfo",
    "LoginRequest",
    "LoginResponse",
    "RefreshTokenRequest",
    "LogoutRequest",
    "ForgotPasswordRequest",
    "ResetPasswordRequest",
    "ChangePasswordRequest",
    "User",
    "UserProfile",
    "UserSettings",
    "CreateUserRequest",
    "UpdateUserRequest",
    "Client",
    "ClientStats",
    "CreateClientRequest",
    "UpdateClientRequest",
    "Program",
    "Exercise",
    "CreateProgramRequest",
    "UpdateProgramRequest",
    "CreateExerciseRequest",
]
