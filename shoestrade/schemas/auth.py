"""인증 관련 Pydantic 요청/응답 스키마 정의.

Authentication request/response schemas: join, login, reissue and logout.
"""

from pydantic import BaseModel, Field, field_validator

from shoestrade.utils.password import MAX_PASSWORD_BYTES, password_too_long


class JoinRequest(BaseModel):
    """회원가입 요청 스키마 (Member sign-up request)."""

    email: str = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(min_length=4, max_length=MAX_PASSWORD_BYTES)

    @field_validator("password")
    @classmethod
    def _within_bcrypt_limit(cls, value: str) -> str:
        # 한글 등 멀티바이트 문자는 글자 수보다 바이트가 많음 — Multibyte text exceeds its character count
        if password_too_long(value):
            raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class LoginRequest(BaseModel):
    """로그인 요청 스키마 (Login with email and password)."""

    email: str
    password: str


class TokenResponse(BaseModel):
    """JWT 토큰 발급 응답 스키마.

    Returned after a successful login or reissue.
    """

    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class RefreshRequest(BaseModel):
    """토큰 재발급/로그아웃 요청 스키마 (Carries the current refresh token)."""

    refresh_token: str
