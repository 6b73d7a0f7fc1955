"""회원 레포지토리 — 회원 조회 및 이메일 중복 검사.

Member Repository — Member lookups by email.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from shoestrade.models.member import Member
from shoestrade.repositories.base import BaseRepository


class MemberRepository(BaseRepository[Member]):
    """회원 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Member)

    async def get_by_email(self, db: AsyncSession, email: str) -> Member | None:
        result = await db.execute(select(Member).where(Member.email == email))
        return result.scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instance
member_repository: MemberRepository = MemberRepository()
