"""브랜드 라우터 — 브랜드 CRUD 엔드포인트.

Brand Router — CRUD endpoints for brand management.
Reads are public; writes require an ADMIN member.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from shoestrade.api.deps import require_admin
from shoestrade.database import get_db
from shoestrade.models.member import Member
from shoestrade.schemas.brand import BrandResponse, BrandSaveRequest
from shoestrade.schemas.result import ListResult, Result, SingleResult
from shoestrade.services.brand_service import brand_service
from shoestrade.utils.response import list_result, single_result, success_result

router: APIRouter = APIRouter()


@router.post("", response_model=SingleResult[BrandResponse])
async def save_brand(
    data: BrandSaveRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    admin: Annotated[Member, Depends(require_admin)],
) -> SingleResult:
    """브랜드를 등록합니다 (Create a brand)."""
    result: BrandResponse = await brand_service.save_brand(db, data)
    await db.commit()
    return single_result(result)


@router.get("", response_model=ListResult[BrandResponse])
async def find_brands(
    db: Annotated[AsyncSession, Depends(get_db)],
    name: Annotated[str | None, Query()] = None,
) -> ListResult:
    """브랜드 목록을 조회합니다 (List brands, optionally filtered by name)."""
    return list_result(await brand_service.find_brands(db, name))


@router.get("/{brand_id}", response_model=SingleResult[BrandResponse])
async def find_brand(
    brand_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SingleResult:
    return single_result(await brand_service.find_brand(db, brand_id))


@router.post("/{brand_id}", response_model=SingleResult[BrandResponse])
async def update_brand_name(
    brand_id: int,
    data: BrandSaveRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    admin: Annotated[Member, Depends(require_admin)],
) -> SingleResult:
    """브랜드 이름을 변경합니다 (Rename a brand)."""
    result: BrandResponse = await brand_service.update_brand_name(db, brand_id, data)
    await db.commit()
    return single_result(result)


@router.delete("/{brand_id}", response_model=Result)
async def delete_brand(
    brand_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    admin: Annotated[Member, Depends(require_admin)],
) -> Result:
    """브랜드를 삭제합니다 (Delete a brand and its products)."""
    await brand_service.delete_brand(db, brand_id)
    await db.commit()
    return success_result()
