"""회원 라우터 — 회원가입/로그인/토큰 및 회원 정보·배송지 엔드포인트.

Member Router — Sign-up, login, token reissue and logout (public), plus
profile and delivery address management for the authenticated member.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from shoestrade.api.deps import get_current_member
from shoestrade.database import get_db
from shoestrade.models.member import Member
from shoestrade.schemas.auth import JoinRequest, LoginRequest, RefreshRequest, TokenResponse
from shoestrade.schemas.member import AddressRequest, AddressResponse, MemberResponse, ShoeSizeRequest
from shoestrade.schemas.result import ListResult, Result, SingleResult
from shoestrade.services.auth_service import auth_service
from shoestrade.services.member_service import member_service
from shoestrade.utils.response import list_result, single_result, success_result

router: APIRouter = APIRouter()


# === 인증 (Authentication) ===


@router.post("/join", response_model=SingleResult[MemberResponse])
async def join(
    data: JoinRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SingleResult:
    """회원가입 (Sign up with email and password)."""
    result: MemberResponse = await auth_service.join(db, data)
    await db.commit()
    return single_result(result)


@router.post("/login", response_model=SingleResult[TokenResponse])
async def login(
    data: LoginRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SingleResult:
    """로그인 — 액세스/리프레시 토큰 발급 (Issue an access/refresh token pair)."""
    result: TokenResponse = await auth_service.login(db, data)
    await db.commit()
    return single_result(result)


@router.post("/reissue", response_model=SingleResult[TokenResponse])
async def reissue(
    data: RefreshRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SingleResult:
    """리프레시 토큰으로 토큰 재발급 (Rotate the token pair)."""
    result: TokenResponse = await auth_service.reissue(db, data)
    await db.commit()
    return single_result(result)


@router.post("/logout", response_model=Result)
async def logout(
    data: RefreshRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Result:
    await auth_service.logout(db, data)
    await db.commit()
    return success_result()


# === 회원 정보 (Profile) ===


@router.get("/me", response_model=SingleResult[MemberResponse])
async def get_me(
    current_member: Annotated[Member, Depends(get_current_member)],
) -> SingleResult:
    return single_result(member_service.get_me(current_member))


@router.post("/me/shoe-size", response_model=SingleResult[MemberResponse])
async def change_shoe_size(
    data: ShoeSizeRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_member: Annotated[Member, Depends(get_current_member)],
) -> SingleResult:
    result: MemberResponse = await member_service.change_shoe_size(db, current_member, data)
    await db.commit()
    return single_result(result)


# === 배송지 (Addresses) ===


@router.get("/address", response_model=ListResult[AddressResponse])
async def find_addresses(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_member: Annotated[Member, Depends(get_current_member)],
) -> ListResult:
    """내 배송지 목록 — 기본 배송지가 먼저 (Base address first)."""
    return list_result(await member_service.find_addresses(db, current_member))


@router.post("/address", response_model=SingleResult[AddressResponse])
async def add_address(
    data: AddressRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_member: Annotated[Member, Depends(get_current_member)],
) -> SingleResult:
    result: AddressResponse = await member_service.add_address(db, current_member, data)
    await db.commit()
    return single_result(result)


@router.post("/address/{address_id}", response_model=SingleResult[AddressResponse])
async def update_address(
    address_id: int,
    data: AddressRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_member: Annotated[Member, Depends(get_current_member)],
) -> SingleResult:
    result: AddressResponse = await member_service.update_address(db, current_member, address_id, data)
    await db.commit()
    return single_result(result)


@router.post("/address/{address_id}/base", response_model=SingleResult[AddressResponse])
async def set_base_address(
    address_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_member: Annotated[Member, Depends(get_current_member)],
) -> SingleResult:
    """기본 배송지로 지정 (Make the address the base address)."""
    result: AddressResponse = await member_service.set_base_address(db, current_member, address_id)
    await db.commit()
    return single_result(result)


@router.delete("/address/{address_id}/base", response_model=Result)
async def unset_base_address(
    address_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_member: Annotated[Member, Depends(get_current_member)],
) -> Result:
    await member_service.unset_base_address(db, current_member, address_id)
    return success_result()


@router.delete("/address/{address_id}", response_model=Result)
async def delete_address(
    address_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_member: Annotated[Member, Depends(get_current_member)],
) -> Result:
    await member_service.delete_address(db, current_member, address_id)
    await db.commit()
    return success_result()
