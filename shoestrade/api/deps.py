"""FastAPI 의존성 주입 모듈 — 인증 및 권한 검사.

FastAPI dependency injection module — Authentication and authorization.

Authentication Flow:
    1. 클라이언트가 Authorization: Bearer <token> 헤더를 전송
       (Client sends Authorization: Bearer <token> header)
    2. 토큰이 없으면 TokenNotFoundError (1000)
       (Missing token → TokenNotFoundError)
    3. decode_token()이 JWT를 검증 — 만료 시 ExpiredTokenError (1002),
       서명 불일치/형식 오류 시 InvalidTokenError (1001)
       (Expired → 1002, bad signature or malformed → 1001)
    4. 페이로드의 "sub" 필드로 회원을 조회 — 없으면 MemberNotFoundError (-102)
       (Member fetched by "sub"; missing member → -102)
"""

from typing import Annotated

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from shoestrade.database import get_db
from shoestrade.models.member import Member
from shoestrade.repositories.member_repository import member_repository
from shoestrade.utils.exceptions import (
    AccessDeniedError,
    ExpiredTokenError,
    InvalidTokenError,
    MemberNotFoundError,
    TokenNotFoundError,
)
from shoestrade.utils.jwt import decode_token

# HTTP Bearer 토큰 추출기 — 토큰 누락은 직접 도메인 오류로 처리
# (auto_error=False: a missing token is reported as a domain error, not a 403)
security: HTTPBearer = HTTPBearer(auto_error=False)


async def get_current_member(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Member:
    """JWT 토큰에서 현재 인증된 회원을 추출합니다.

    Decode the bearer access token and return the authenticated member.

    Raises:
        TokenNotFoundError: 토큰이 없을 때 (No bearer token)
        ExpiredTokenError: 토큰이 만료되었을 때 (Expired token)
        InvalidTokenError: 변조되었거나 형식이 잘못된 토큰 (Tampered or malformed token)
        MemberNotFoundError: 토큰의 회원이 존재하지 않을 때 (Member no longer exists)
    """
    if credentials is None:
        raise TokenNotFoundError()

    try:
        payload: dict = decode_token(credentials.credentials)
    except jwt.ExpiredSignatureError:
        raise ExpiredTokenError()
    except jwt.InvalidTokenError:
        raise InvalidTokenError()

    # 리프레시 토큰을 액세스 토큰으로 사용하는 경우 거부 — Reject refresh tokens used as access tokens
    if payload.get("type") != "access":
        raise InvalidTokenError()
    try:
        member_id: int = int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        raise InvalidTokenError()

    member: Member | None = await member_repository.get_by_id(db, member_id)
    if member is None:
        raise MemberNotFoundError(member_id)
    return member


async def require_admin(
    current_member: Annotated[Member, Depends(get_current_member)],
) -> Member:
    """관리자 권한 검사 의존성 (Allow ADMIN members only, otherwise AccessDeniedError)."""
    if not current_member.is_admin:
        raise AccessDeniedError()
    return current_member
