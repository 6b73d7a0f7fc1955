"""상품 라우터 — 상품 및 상품 이미지 엔드포인트.

Product Router — Product registration, search, detail, update, deletion and
image management. Reads are public; writes require an ADMIN member.

Static paths (/image...) are declared before /{product_id} routes so they are
not captured by the id parameter.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from shoestrade.api.deps import require_admin
from shoestrade.database import get_db
from shoestrade.models.member import Member
from shoestrade.models.trade import TradeState
from shoestrade.schemas.product import (
    ProductDetailResponse,
    ProductImageAddRequest,
    ProductImageResponse,
    ProductLoadResponse,
    ProductSaveRequest,
)
from shoestrade.schemas.result import ListResult, PageResult, Result, SingleResult
from shoestrade.schemas.trade import TradeDoneResponse, TradeTransactionResponse
from shoestrade.services.product_service import product_service
from shoestrade.services.trade_service import trade_service
from shoestrade.utils.pagination import PageRequest, page_params
from shoestrade.utils.response import list_result, page_result, single_result, success_result

router: APIRouter = APIRouter()


@router.post("", response_model=SingleResult[ProductLoadResponse])
async def save_product(
    data: ProductSaveRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    admin: Annotated[Member, Depends(require_admin)],
) -> SingleResult:
    """상품을 등록합니다 — 17개 사이즈와 초기 이미지가 함께 생성됩니다.

    Register a product along with its 17 size buckets and initial images.
    """
    result: ProductLoadResponse = await product_service.save_product(db, data)
    await db.commit()
    return single_result(result)


@router.get("", response_model=PageResult[ProductLoadResponse])
async def find_product_by_name_in_brand(
    db: Annotated[AsyncSession, Depends(get_db)],
    page: Annotated[PageRequest, Depends(page_params)],
    name: Annotated[str | None, Query()] = None,
    brand_id: Annotated[list[int] | None, Query()] = None,
) -> PageResult:
    """상품을 검색합니다.

    Search products by name substring within the selected brands
    (``?name=...&brand_id=1&brand_id=2``).
    """
    items, total = await product_service.find_product_by_name_in_brand(db, name, brand_id, page)
    return page_result(items, total, page.page, page.per_page)


@router.post("/image", response_model=Result)
async def add_product_image(
    data: ProductImageAddRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    admin: Annotated[Member, Depends(require_admin)],
) -> Result:
    """상품 이미지를 등록합니다 (Add images to a product)."""
    await product_service.add_product_image(db, data)
    await db.commit()
    return success_result()


@router.delete("/image/{product_image_id}", response_model=Result)
async def delete_product_image(
    product_image_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    admin: Annotated[Member, Depends(require_admin)],
) -> Result:
    await product_service.delete_product_image(db, product_image_id)
    await db.commit()
    return success_result()


@router.get("/{product_id}", response_model=SingleResult[ProductDetailResponse])
async def find_product_detail(
    product_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SingleResult:
    """상품 상세 정보를 조회합니다 (Product detail)."""
    return single_result(await product_service.find_product_detail_by_id(db, product_id))


@router.post("/{product_id}", response_model=Result)
async def update_product(
    product_id: int,
    data: ProductSaveRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    admin: Annotated[Member, Depends(require_admin)],
) -> Result:
    """상품 정보를 수정합니다 (Update a product; image_list is ignored)."""
    await product_service.update_product(db, product_id, data)
    await db.commit()
    return success_result()


@router.delete("/{product_id}", response_model=Result)
async def delete_product(
    product_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    admin: Annotated[Member, Depends(require_admin)],
) -> Result:
    await product_service.delete_product(db, product_id)
    await db.commit()
    return success_result()


@router.get("/{product_id}/image", response_model=ListResult[ProductImageResponse])
async def find_product_images(
    product_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ListResult:
    return list_result(await product_service.find_product_image_by_product_id(db, product_id))


@router.get("/{product_id}/trade/done", response_model=PageResult[TradeDoneResponse])
async def find_done_trade(
    product_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    page: Annotated[PageRequest, Depends(page_params)],
) -> PageResult:
    """상품 체결 내역을 최신순으로 조회합니다 (Completed trades, newest first)."""
    items, total = await trade_service.find_done_trade(db, product_id, page)
    return page_result(items, total, page.page, page.per_page)


@router.get("/{product_id}/trade/{trade_state}", response_model=PageResult[TradeTransactionResponse])
async def find_transaction_trade(
    product_id: int,
    trade_state: TradeState,
    db: Annotated[AsyncSession, Depends(get_db)],
    page: Annotated[PageRequest, Depends(page_params)],
) -> PageResult:
    """가격·사이즈별 입찰 집계를 조회합니다 (Open bids/asks grouped by price and size)."""
    items, total = await trade_service.find_transaction_trade(db, product_id, trade_state, page)
    return page_result(items, total, page.page, page.per_page)
