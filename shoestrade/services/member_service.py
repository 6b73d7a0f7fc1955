"""회원 서비스 — 회원 정보 및 배송지 관리 비즈니스 로직.

Member Service — Profile and delivery address management.

Base address rules: the first address a member registers becomes base;
the base address can neither be deleted nor unset, and only moves when
another address is made base.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from shoestrade.models.member import Address, Member
from shoestrade.repositories.address_repository import address_repository
from shoestrade.schemas.member import AddressRequest, AddressResponse, MemberResponse, ShoeSizeRequest
from shoestrade.utils.exceptions import (
    AddressNotFoundError,
    BaseAddressNotDeleteError,
    BaseAddressUncheckedError,
    NumberFormatError,
)


class MemberService:
    """회원 관련 비즈니스 로직을 처리하는 서비스.

    Service handling member profile and address business logic.
    """

    def _to_response(self, member: Member) -> MemberResponse:
        return MemberResponse(id=member.id, email=member.email, role=member.role, shoe_size=member.shoe_size)

    def _to_address_response(self, address: Address) -> AddressResponse:
        return AddressResponse(
            id=address.id,
            name=address.name,
            phone=address.phone,
            address_line=address.address_line,
            detail=address.detail,
            zip_code=address.zip_code,
            is_base=address.is_base,
        )

    async def _get_address(self, db: AsyncSession, member: Member, address_id: int) -> Address:
        address: Address | None = await address_repository.get_member_address(db, member.id, address_id)
        if address is None:
            raise AddressNotFoundError(address_id)
        return address

    def get_me(self, member: Member) -> MemberResponse:
        return self._to_response(member)

    async def change_shoe_size(
        self,
        db: AsyncSession,
        member: Member,
        data: ShoeSizeRequest,
    ) -> MemberResponse:
        """선호 신발 사이즈를 변경합니다.

        Change the member's shoe size. The value is received as text and must
        parse as an integer.

        Raises:
            NumberFormatError: 정수가 아닌 값일 때 (Value is not an integer)
        """
        try:
            shoe_size: int = int(data.shoe_size.strip())
        except ValueError:
            raise NumberFormatError(data.shoe_size)

        member.shoe_size = shoe_size
        await db.flush()
        return self._to_response(member)

    async def find_addresses(
        self,
        db: AsyncSession,
        member: Member,
    ) -> list[AddressResponse]:
        addresses: list[Address] = await address_repository.get_by_member(db, member.id)
        return [self._to_address_response(a) for a in addresses]

    async def add_address(
        self,
        db: AsyncSession,
        member: Member,
        data: AddressRequest,
    ) -> AddressResponse:
        """배송지를 등록합니다 (The first address of a member becomes base)."""
        has_address: bool = await address_repository.exists(db, {"member_id": member.id})
        address: Address = await address_repository.create(
            db,
            {**data.model_dump(), "member_id": member.id, "is_base": not has_address},
        )
        return self._to_address_response(address)

    async def update_address(
        self,
        db: AsyncSession,
        member: Member,
        address_id: int,
        data: AddressRequest,
    ) -> AddressResponse:
        address: Address = await self._get_address(db, member, address_id)
        for field, value in data.model_dump().items():
            setattr(address, field, value)
        await db.flush()
        return self._to_address_response(address)

    async def set_base_address(
        self,
        db: AsyncSession,
        member: Member,
        address_id: int,
    ) -> AddressResponse:
        """기본 배송지를 변경합니다.

        Make ``address_id`` the member's base address, clearing the flag on
        the previous one.

        Raises:
            AddressNotFoundError: 배송지가 없을 때 (No such address for the member)
        """
        address: Address = await self._get_address(db, member, address_id)
        await address_repository.clear_base(db, member.id)
        address.is_base = True
        await db.flush()
        return self._to_address_response(address)

    async def unset_base_address(
        self,
        db: AsyncSession,
        member: Member,
        address_id: int,
    ) -> None:
        """기본 배송지 해제 요청을 처리합니다.

        The base address cannot be unset; unsetting a non-base address
        changes nothing.

        Raises:
            AddressNotFoundError: 배송지가 없을 때 (No such address for the member)
            BaseAddressUncheckedError: 기본 배송지일 때 (Address is the base address)
        """
        address: Address = await self._get_address(db, member, address_id)
        if address.is_base:
            raise BaseAddressUncheckedError(address_id)

    async def delete_address(
        self,
        db: AsyncSession,
        member: Member,
        address_id: int,
    ) -> None:
        """배송지를 삭제합니다.

        Raises:
            AddressNotFoundError: 배송지가 없을 때 (No such address for the member)
            BaseAddressNotDeleteError: 기본 배송지일 때 (Address is the base address)
        """
        address: Address = await self._get_address(db, member, address_id)
        if address.is_base:
            raise BaseAddressNotDeleteError(address_id)
        await db.delete(address)
        await db.flush()


# 싱글턴 인스턴스 — Singleton instance
member_service: MemberService = MemberService()
