"""배송지 레포지토리 — 회원별 배송지 조회 및 기본 배송지 관리.

Address Repository — Member-scoped address lookups and base flag handling.
"""

from sqlalchemy import Select, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from shoestrade.models.member import Address
from shoestrade.repositories.base import BaseRepository


class AddressRepository(BaseRepository[Address]):
    """배송지 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Address)

    async def get_by_member(self, db: AsyncSession, member_id: int) -> list[Address]:
        query: Select = (
            select(Address)
            .where(Address.member_id == member_id)
            .order_by(Address.is_base.desc(), Address.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def get_member_address(
        self,
        db: AsyncSession,
        member_id: int,
        address_id: int,
    ) -> Address | None:
        """회원 소유의 배송지를 조회합니다.

        Retrieve an address only if it belongs to ``member_id``; another
        member's address is reported the same as a missing one.
        """
        query: Select = select(Address).where(
            Address.id == address_id, Address.member_id == member_id
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def clear_base(self, db: AsyncSession, member_id: int) -> None:
        """회원의 모든 배송지에서 기본 표시를 해제합니다 (Unset every base flag of a member)."""
        await db.execute(
            update(Address)
            .where(Address.member_id == member_id, Address.is_base.is_(True))
            .values(is_base=False)
            .execution_options(synchronize_session="fetch")
        )


# 싱글턴 인스턴스 — Singleton instance
address_repository: AddressRepository = AddressRepository()
