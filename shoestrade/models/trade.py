"""입찰/체결 SQLAlchemy ORM 모델 정의.

Trade SQLAlchemy ORM model definitions.
A trade is an open bid (BUY) or ask (SELL) on a product size until it is
settled, at which point its state becomes DONE.

Tables:
    - trades: 입찰 내역 (Bids, asks and completed trades)
"""

import enum
from datetime import datetime, timezone

from sqlalchemy import DateTime, Enum, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shoestrade.database import Base


class TradeState(str, enum.Enum):
    """입찰 상태 (Trade state)."""

    BUY = "BUY"  # 구매 입찰 (Open bid)
    SELL = "SELL"  # 판매 입찰 (Open ask)
    DONE = "DONE"  # 체결 완료 (Settled)


# 열린 입찰 상태 — States that can still be settled
OPEN_TRADE_STATES: frozenset[TradeState] = frozenset({TradeState.BUY, TradeState.SELL})


class Trade(Base):
    """입찰 모델.

    Trade model — one bid/ask registered by a member for a product size.

    Attributes:
        id: 고유 식별자 (Unique identifier)
        price: 입찰 가격 (Bid/ask price in KRW)
        trade_state: 입찰 상태 (BUY, SELL, DONE)
        product_size_id: 상품 사이즈 FK (Product size foreign key)
        member_id: 등록 회원 FK (Member who registered the trade)
        counterparty_id: 체결 회원 FK (Member who settled it, None while open)
        created_at: 등록 일시 (Registration timestamp)
        last_modified_at: 최종 수정 일시 (Last modification timestamp, used for completed trade ordering)
    """

    __tablename__ = "trades"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    trade_state: Mapped[TradeState] = mapped_column(
        Enum(TradeState, native_enum=False, length=10), nullable=False, index=True
    )
    product_size_id: Mapped[int] = mapped_column(Integer, ForeignKey("product_sizes.id", ondelete="CASCADE"), nullable=False, index=True)
    member_id: Mapped[int] = mapped_column(Integer, ForeignKey("members.id", ondelete="CASCADE"), nullable=False, index=True)
    counterparty_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("members.id", ondelete="SET NULL"), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    last_modified_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships
    product_size = relationship("ProductSize", back_populates="trades")

    @property
    def is_open(self) -> bool:
        return self.trade_state in OPEN_TRADE_STATES
