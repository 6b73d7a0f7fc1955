"""입찰 라우터 — 회원의 구매/판매 입찰 관리 엔드포인트.

Trade Router — Registration, listing, repricing, cancellation and
settlement of bids/asks. Every endpoint requires an authenticated member.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from shoestrade.api.deps import get_current_member
from shoestrade.database import get_db
from shoestrade.models.member import Member
from shoestrade.models.trade import TradeState
from shoestrade.schemas.result import ListResult, Result, SingleResult
from shoestrade.schemas.trade import TradePriceRequest, TradeResponse, TradeSaveRequest
from shoestrade.services.trade_service import trade_service
from shoestrade.utils.response import list_result, single_result, success_result

router: APIRouter = APIRouter()


@router.post("", response_model=SingleResult[TradeResponse])
async def register_trade(
    data: TradeSaveRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_member: Annotated[Member, Depends(get_current_member)],
) -> SingleResult:
    """구매/판매 입찰을 등록합니다 (Register a bid or ask)."""
    result: TradeResponse = await trade_service.register_trade(db, current_member, data)
    await db.commit()
    return single_result(result)


@router.get("/me", response_model=ListResult[TradeResponse])
async def find_my_trades(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_member: Annotated[Member, Depends(get_current_member)],
    trade_state: Annotated[TradeState | None, Query()] = None,
) -> ListResult:
    """내 입찰 목록을 조회합니다 (The member's trades, optionally by state)."""
    return list_result(await trade_service.find_member_trades(db, current_member, trade_state))


@router.post("/{trade_id}", response_model=SingleResult[TradeResponse])
async def update_trade_price(
    trade_id: int,
    data: TradePriceRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_member: Annotated[Member, Depends(get_current_member)],
) -> SingleResult:
    result: TradeResponse = await trade_service.update_trade_price(db, current_member, trade_id, data)
    await db.commit()
    return single_result(result)


@router.delete("/{trade_id}", response_model=Result)
async def delete_trade(
    trade_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_member: Annotated[Member, Depends(get_current_member)],
) -> Result:
    await trade_service.delete_trade(db, current_member, trade_id)
    await db.commit()
    return success_result()


@router.post("/{trade_id}/settle", response_model=SingleResult[TradeResponse])
async def settle_trade(
    trade_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_member: Annotated[Member, Depends(get_current_member)],
) -> SingleResult:
    """다른 회원의 입찰을 체결합니다 (Accept another member's open trade)."""
    result: TradeResponse = await trade_service.settle_trade(db, current_member, trade_id)
    await db.commit()
    return single_result(result)
