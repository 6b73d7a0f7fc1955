"""인증 서비스 — 회원가입, 로그인, 토큰 재발급, 로그아웃 비즈니스 로직.

Auth Service — Business logic for member sign-up, login, token reissue and
logout. Only the most recently issued refresh token of a member is kept.
"""

from datetime import datetime, timedelta, timezone

import jwt
from sqlalchemy.ext.asyncio import AsyncSession

from shoestrade.config import settings
from shoestrade.models.member import Member, MemberRole
from shoestrade.models.token import RefreshToken
from shoestrade.repositories.auth_repository import auth_repository
from shoestrade.repositories.member_repository import member_repository
from shoestrade.schemas.auth import JoinRequest, LoginRequest, RefreshRequest, TokenResponse
from shoestrade.schemas.member import MemberResponse
from shoestrade.utils.exceptions import (
    ExpiredRefreshTokenError,
    InvalidRefreshTokenError,
    MemberDuplicationEmailError,
    MemberNotFoundError,
    WrongEmailError,
    WrongPasswordError,
)
from shoestrade.utils.jwt import create_access_token, create_refresh_token, decode_token
from shoestrade.utils.password import hash_password, verify_password


def _as_utc(value: datetime) -> datetime:
    # SQLite는 timezone 정보 없이 반환 — SQLite returns naive datetimes
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


class AuthService:
    """인증 관련 비즈니스 로직을 처리하는 서비스.

    Service handling authentication business logic.
    """

    def _build_jwt_payload(self, member: Member) -> dict[str, str]:
        return {"sub": str(member.id), "role": member.role.value}

    async def _generate_tokens(
        self,
        db: AsyncSession,
        member: Member,
    ) -> TokenResponse:
        """액세스 토큰과 리프레시 토큰을 생성합니다.

        Issue an access/refresh token pair, replacing every refresh token the
        member held before.
        """
        payload: dict[str, str] = self._build_jwt_payload(member)
        access_token: str = create_access_token(payload)
        refresh_token: str = create_refresh_token(payload)

        await auth_repository.delete_member_refresh_tokens(db, member.id)

        expires_at: datetime = datetime.now(timezone.utc) + timedelta(
            days=settings.JWT_REFRESH_TOKEN_EXPIRE_DAYS
        )
        await auth_repository.create_refresh_token(
            db, member_id=member.id, token=refresh_token, expires_at=expires_at
        )

        return TokenResponse(access_token=access_token, refresh_token=refresh_token)

    async def join(
        self,
        db: AsyncSession,
        data: JoinRequest,
        role: MemberRole = MemberRole.USER,
    ) -> MemberResponse:
        """회원가입을 처리합니다.

        Register a member with a bcrypt-hashed password.

        Raises:
            MemberDuplicationEmailError: 이미 가입된 이메일일 때 (Email already registered)
        """
        if await member_repository.get_by_email(db, data.email) is not None:
            raise MemberDuplicationEmailError(data.email)

        member: Member = await member_repository.create(
            db,
            {
                "email": data.email,
                "password_hash": hash_password(data.password),
                "role": role,
            },
        )
        return MemberResponse(id=member.id, email=member.email, role=member.role, shoe_size=member.shoe_size)

    async def login(
        self,
        db: AsyncSession,
        data: LoginRequest,
    ) -> TokenResponse:
        """로그인을 처리합니다.

        Authenticate with email and password.

        Raises:
            WrongEmailError: 가입되지 않은 이메일일 때 (Unknown email)
            WrongPasswordError: 비밀번호가 틀렸을 때 (Password mismatch)
        """
        member: Member | None = await member_repository.get_by_email(db, data.email)
        if member is None:
            raise WrongEmailError(data.email)
        if not verify_password(data.password, member.password_hash):
            raise WrongPasswordError(data.email)

        return await self._generate_tokens(db, member)

    async def reissue(
        self,
        db: AsyncSession,
        data: RefreshRequest,
    ) -> TokenResponse:
        """리프레시 토큰으로 새 토큰 쌍을 발급합니다.

        Exchange a stored, unexpired refresh token for a new token pair. The
        presented token is replaced by the newly issued one.

        Raises:
            InvalidRefreshTokenError: 저장된 토큰과 일치하지 않거나 유효하지 않을 때
                                      (Unknown or invalid refresh token)
            ExpiredRefreshTokenError: 만료된 토큰일 때 (Expired refresh token)
            MemberNotFoundError: 토큰의 회원이 존재하지 않을 때 (Member no longer exists)
        """
        db_token: RefreshToken | None = await auth_repository.get_refresh_token(db, data.refresh_token)
        if db_token is None:
            raise InvalidRefreshTokenError()

        if _as_utc(db_token.expires_at) < datetime.now(timezone.utc):
            raise ExpiredRefreshTokenError()

        try:
            payload: dict = decode_token(data.refresh_token)
        except jwt.ExpiredSignatureError:
            raise ExpiredRefreshTokenError()
        except jwt.InvalidTokenError:
            raise InvalidRefreshTokenError()

        if payload.get("type") != "refresh":
            raise InvalidRefreshTokenError()

        member: Member | None = await member_repository.get_by_id(db, db_token.member_id)
        if member is None:
            raise MemberNotFoundError(db_token.member_id)

        return await self._generate_tokens(db, member)

    async def logout(
        self,
        db: AsyncSession,
        data: RefreshRequest,
    ) -> None:
        """로그아웃 처리 — 리프레시 토큰을 폐기합니다 (Revoke the refresh token)."""
        await auth_repository.delete_refresh_token(db, data.refresh_token)


# 싱글턴 인스턴스 — Singleton instance
auth_service: AuthService = AuthService()
