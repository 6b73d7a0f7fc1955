"""입찰 관련 Pydantic 요청/응답 스키마 정의.

Trade-related request/response schema definitions: bid/ask registration,
the completed-trade projection and the grouped open bid/ask projection.
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from shoestrade.models.trade import OPEN_TRADE_STATES, TradeState


class TradeSaveRequest(BaseModel):
    """입찰 등록 요청 스키마.

    Bid/ask registration request. ``trade_state`` must be BUY or SELL.
    """

    product_id: int
    size: int
    price: int = Field(gt=0)
    trade_state: TradeState

    @field_validator("trade_state")
    @classmethod
    def _open_state_only(cls, value: TradeState) -> TradeState:
        if value not in OPEN_TRADE_STATES:
            raise ValueError("trade_state must be BUY or SELL")
        return value


class TradePriceRequest(BaseModel):
    """입찰 가격 변경 요청 스키마 (Change the price of an open trade)."""

    price: int = Field(gt=0)


class TradeResponse(BaseModel):
    """입찰 응답 스키마 (Trade as seen by its owner)."""

    id: int
    product_id: int
    product_kor_name: str
    size: int
    price: int
    trade_state: TradeState
    last_modified_at: datetime


class TradeDoneResponse(BaseModel):
    """체결 내역 응답 스키마 (Completed trade: size, price, settled time)."""

    size: int
    price: int
    last_modified_at: datetime


class TradeTransactionResponse(BaseModel):
    """입찰 집계 응답 스키마 (Open bids/asks grouped by price and size)."""

    size: int
    price: int
    count: int
