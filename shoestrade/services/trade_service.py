"""입찰 서비스 — 체결 내역/입찰 집계 조회 및 입찰 관리.

Trade Service — Completed-trade and grouped bid/ask queries for a product,
plus registration, repricing, cancellation and settlement of a member's
bids/asks. Settlement flips one open trade to DONE; there is no order
matching.
"""

from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from shoestrade.models.member import Member
from shoestrade.models.product import ProductSize
from shoestrade.models.trade import OPEN_TRADE_STATES, Trade, TradeState
from shoestrade.repositories.product_repository import product_repository
from shoestrade.repositories.trade_repository import trade_repository
from shoestrade.schemas.trade import (
    TradeDoneResponse,
    TradePriceRequest,
    TradeResponse,
    TradeSaveRequest,
    TradeTransactionResponse,
)
from shoestrade.services.product_service import product_service
from shoestrade.utils.exceptions import ProductNotFoundError, TradeNotFoundError
from shoestrade.utils.pagination import PageRequest, paginate


class TradeService:
    """입찰 관련 비즈니스 로직을 처리하는 서비스.

    Service handling trade business logic.
    """

    def _to_response(self, trade: Trade) -> TradeResponse:
        """입찰 모델을 응답으로 변환합니다 (product_size.product must be loaded)."""
        return TradeResponse(
            id=trade.id,
            product_id=trade.product_size.product_id,
            product_kor_name=trade.product_size.product.kor_name,
            size=trade.product_size.size,
            price=trade.price,
            trade_state=trade.trade_state,
            last_modified_at=trade.last_modified_at,
        )

    async def _check_product(self, db: AsyncSession, product_id: int) -> None:
        if not await product_repository.exists(db, {"id": product_id}):
            raise ProductNotFoundError(product_id)

    async def _get_own_open_trade(self, db: AsyncSession, member: Member, trade_id: int) -> Trade:
        """회원 본인의 열린 입찰을 조회합니다.

        Resolve a trade the member registered and that is still open. Other
        members' trades and settled trades are reported as not found.
        """
        trade: Trade | None = await trade_repository.get_with_product(db, trade_id)
        if trade is None or trade.member_id != member.id or not trade.is_open:
            raise TradeNotFoundError(trade_id)
        return trade

    async def find_done_trade(
        self,
        db: AsyncSession,
        product_id: int,
        page: PageRequest,
    ) -> tuple[list[TradeDoneResponse], int]:
        """상품 체결 내역을 조회합니다.

        List a product's DONE trades, most recently modified first.

        Returns:
            tuple[list[TradeDoneResponse], int]: (현재 페이지, 전체 개수) (Page items, total)

        Raises:
            ProductNotFoundError: 상품이 없을 때 (No such product)
        """
        await self._check_product(db, product_id)
        query = trade_repository.build_done_trade_query(product_id)
        rows, total = await paginate(db, query, page, scalars=False)
        return [
            TradeDoneResponse(size=r.size, price=r.price, last_modified_at=r.last_modified_at)
            for r in rows
        ], total

    async def find_transaction_trade(
        self,
        db: AsyncSession,
        product_id: int,
        trade_state: TradeState,
        page: PageRequest,
    ) -> tuple[list[TradeTransactionResponse], int]:
        """상품 입찰 집계를 조회합니다.

        List a product's open bids (BUY) or asks (SELL) grouped by
        (price, size), one row per pair with the number of trades in it.

        Raises:
            ProductNotFoundError: 상품이 없을 때 (No such product)
            TradeNotFoundError: 열린 입찰 상태가 아닐 때 (State is not BUY/SELL)
        """
        if trade_state not in OPEN_TRADE_STATES:
            raise TradeNotFoundError(trade_state.value)
        await self._check_product(db, product_id)

        query = trade_repository.build_transaction_trade_query(product_id, trade_state)
        rows, total = await paginate(db, query, page, scalars=False)
        return [
            TradeTransactionResponse(size=r.size, price=r.price, count=r.count)
            for r in rows
        ], total

    async def register_trade(
        self,
        db: AsyncSession,
        member: Member,
        data: TradeSaveRequest,
    ) -> TradeResponse:
        """구매/판매 입찰을 등록합니다.

        Register an open bid or ask for one size of a product.

        Raises:
            ProductNotFoundError: 상품이 없을 때 (No such product)
            ProductSizeNotFoundError: 사이즈가 없을 때 (No such size bucket)
        """
        product_size: ProductSize = await product_service.find_product_size(db, data.product_id, data.size)
        trade: Trade = await trade_repository.create(
            db,
            {
                "price": data.price,
                "trade_state": data.trade_state,
                "product_size_id": product_size.id,
                "member_id": member.id,
            },
        )
        loaded: Trade | None = await trade_repository.get_with_product(db, trade.id)
        return self._to_response(loaded)

    async def find_member_trades(
        self,
        db: AsyncSession,
        member: Member,
        trade_state: TradeState | None = None,
    ) -> list[TradeResponse]:
        trades: list[Trade] = await trade_repository.get_by_member(db, member.id, trade_state)
        return [self._to_response(t) for t in trades]

    async def update_trade_price(
        self,
        db: AsyncSession,
        member: Member,
        trade_id: int,
        data: TradePriceRequest,
    ) -> TradeResponse:
        """열린 입찰의 가격을 변경합니다 (Reprice one of the member's open trades)."""
        trade: Trade = await self._get_own_open_trade(db, member, trade_id)
        trade.price = data.price
        trade.last_modified_at = datetime.now(timezone.utc)
        await db.flush()
        return self._to_response(trade)

    async def delete_trade(
        self,
        db: AsyncSession,
        member: Member,
        trade_id: int,
    ) -> None:
        """열린 입찰을 취소합니다 (Cancel one of the member's open trades)."""
        trade: Trade = await self._get_own_open_trade(db, member, trade_id)
        await db.delete(trade)
        await db.flush()

    async def settle_trade(
        self,
        db: AsyncSession,
        member: Member,
        trade_id: int,
    ) -> TradeResponse:
        """다른 회원의 열린 입찰을 체결합니다.

        Accept another member's open bid or ask: the trade becomes DONE, the
        accepting member is recorded as counterparty and the modification
        time is refreshed, which places it first in the completed-trade list.

        Raises:
            TradeNotFoundError: 입찰이 없거나, 이미 체결되었거나, 본인 입찰일 때
                                (Missing, already settled, or the member's own trade)
        """
        trade: Trade | None = await trade_repository.get_with_product(db, trade_id)
        if trade is None or not trade.is_open or trade.member_id == member.id:
            raise TradeNotFoundError(trade_id)

        trade.trade_state = TradeState.DONE
        trade.counterparty_id = member.id
        trade.last_modified_at = datetime.now(timezone.utc)
        await db.flush()
        return self._to_response(trade)


# 싱글턴 인스턴스 — Singleton instance
trade_service: TradeService = TradeService()
