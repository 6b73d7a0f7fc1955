"""인증 레포지토리 — 리프레시 토큰 CRUD.

Auth Repository — Refresh token lifecycle management.
"""

from datetime import datetime

from sqlalchemy import Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from shoestrade.models.token import RefreshToken


class AuthRepository:
    """리프레시 토큰 관련 데이터베이스 쿼리를 담당하는 레포지토리."""

    async def create_refresh_token(
        self,
        db: AsyncSession,
        member_id: int,
        token: str,
        expires_at: datetime,
    ) -> RefreshToken:
        """새 리프레시 토큰을 저장합니다.

        Persist a newly issued refresh token.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            member_id: 토큰 소유 회원 ID (Token owner)
            token: JWT 리프레시 토큰 문자열 (Refresh token string)
            expires_at: 토큰 만료 일시 (Expiration timestamp)

        Returns:
            RefreshToken: 생성된 토큰 레코드 (Created record)
        """
        db_token: RefreshToken = RefreshToken(
            member_id=member_id,
            token=token,
            expires_at=expires_at,
        )
        db.add(db_token)
        await db.flush()
        return db_token

    async def get_refresh_token(
        self,
        db: AsyncSession,
        token: str,
    ) -> RefreshToken | None:
        query: Select = select(RefreshToken).where(RefreshToken.token == token)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def delete_refresh_token(
        self,
        db: AsyncSession,
        token: str,
    ) -> bool:
        """리프레시 토큰을 삭제합니다 (Delete one refresh token; False if absent)."""
        result = await db.execute(delete(RefreshToken).where(RefreshToken.token == token))
        return (result.rowcount or 0) > 0

    async def delete_member_refresh_tokens(
        self,
        db: AsyncSession,
        member_id: int,
    ) -> None:
        """회원의 모든 리프레시 토큰을 삭제합니다 (Revoke every refresh token of a member)."""
        await db.execute(delete(RefreshToken).where(RefreshToken.member_id == member_id))


# 싱글턴 인스턴스 — Singleton instance
auth_repository: AuthRepository = AuthRepository()
