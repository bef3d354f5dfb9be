from typing import Optional

from .common import CarespaceModel, RequestModel
from .users import User


class LoginRequest(RequestModel):
    email: str
    password: str


class LoginResponse(CarespaceModel):
    access_token: str
    refresh_token: Optional[str] = None
    token_type: str = "Bearer"
    expires_in: Optional[int] = None
    user: Optional[User] = None


class RefreshTokenRequest(RequestModel):
    refresh_token: str


class LogoutRequest(RequestModel):
    refresh_token: Optional[str] = None


class ForgotPasswordRequest(RequestModel):
    email: str


class ResetPasswordRequest(RequestModel):
    token: str
    new_password: str


class ChangePasswordRequest(RequestModel):
    current_password: str
    new_password: str
