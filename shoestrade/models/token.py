"""리프레시 토큰 모델 — JWT 리프레시 토큰 저장.

Refresh Token model — Stores JWT refresh tokens for session management.
Each token is bound to a specific member and has an expiration timestamp.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shoestrade.database import Base


class RefreshToken(Base):
    """리프레시 토큰 테이블.

    Refresh token table. A reissue deletes the presented token and stores the
    newly issued one.
    """

    __tablename__ = "refresh_tokens"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    member_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("members.id", ondelete="CASCADE"),
        nullable=False,
    )
    token: Mapped[str] = mapped_column(String(512), unique=True, nullable=False)
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    member = relationship("Member", back_populates="refresh_tokens")
