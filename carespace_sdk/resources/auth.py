from typing import Any, Optional, Union

from ..models import (
    ApiResponse,
    ChangePasswordRequest,
    ForgotPasswordRequest,
    LoginRequest,
    LoginResponse,
    LogoutRequest,
    RefreshTokenRequest,
    ResetPasswordRequest,
)
from .base import BaseResource


class AuthResource(BaseResource):
    """Authentication endpoints (``/auth``)."""

    async def login(
        self,
        email_or_request: Union[str, LoginRequest],
        password: Optional[str] = None,
    ) -> ApiResponse[LoginResponse]:
        """
        Exchange credentials for an access token.

        Accepts either a ``LoginRequest`` or ``email, password``.
        """
        if isinstance(email_or_request, LoginRequest):
            body = email_or_request
        else:
            if not email_or_request or not password:
                raise ValueError("email and password are required")
            body = LoginRequest(email=email_or_request, password=password)
        payload = await self._http.post("/auth/login", body)
        return self._parse(ApiResponse[LoginResponse], payload)

    async def refresh_token(
        self, refresh_token: Union[str, RefreshTokenRequest]
    ) -> ApiResponse[LoginResponse]:
        if isinstance(refresh_token, str):
            if not refresh_token.strip():
                raise ValueError("refresh_token is required")
            body = RefreshTokenRequest(refresh_token=refresh_token)
        else:
            body = self._require(refresh_token, "refresh_token")
        payload = await self._http.post("/auth/refresh", body)
        return self._parse(ApiResponse[LoginResponse], payload)

    async def logout(self, refresh_token: Optional[str] = None) -> ApiResponse[Any]:
        body = LogoutRequest(refresh_token=refresh_token) if refresh_token else None
        payload = await self._http.post("/auth/logout", body)
        return self._parse(ApiResponse[Any], payload)

    async def forgot_password(self, email: str) -> ApiResponse[Any]:
        payload = await self._http.post(
            "/auth/forgot-password", ForgotPasswordRequest(email=email)
        )
        return self._parse(ApiResponse[Any], payload)

    async def reset_password(self, token: str, new_password: str) -> ApiResponse[Any]:
        payload = await self._http.post(
            "/auth/reset-password",
            ResetPasswordRequest(token=token, new_password=new_password),
        )
        return self._parse(ApiResponse[Any], payload)

    async def change_password(
        self, current_password: str, new_password: str
    ) -> ApiResponse[Any]:
        payload = await self._http.post(
            "/auth/change-password",
            ChangePasswordRequest(
                current_password=current_password, new_password=new_password
            ),
        )
        return self._parse(ApiResponse[Any], payload)

    async def verify_email(self, token: str) -> ApiResponse[Any]:
        payload = await self._http.post("/auth/verify-email", {"token": token})
        return self._parse(ApiResponse[Any], payload)

    async def resend_verification(self, email: str) -> ApiResponse[Any]:
        payload = await self._http.post("/auth/resend-verification", {"email": email})
        return self._parse(ApiResponse[Any], payload)
