"""회원 및 주소 SQLAlchemy ORM 모델 정의.

Member and Address SQLAlchemy ORM model definitions.

Tables:
    - members: 회원 계정 (Member accounts, unique email)
    - addresses: 배송지 (Delivery addresses, exactly one base address per member once any exists)
"""

import enum
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shoestrade.database import Base


class MemberRole(str, enum.Enum):
    """회원 권한 (Member role)."""

    USER = "USER"
    ADMIN = "ADMIN"


class Member(Base):
    """회원 모델.

    Member model. Email is the login identifier; the password is stored as a
    bcrypt hash.

    Attributes:
        id: 고유 식별자 (Unique identifier)
        email: 이메일 (Login email, unique)
        password_hash: bcrypt 비밀번호 해시 (Bcrypt password hash)
        role: 권한 (USER or ADMIN)
        shoe_size: 선호 신발 사이즈 (Preferred shoe size in mm, optional)
    """

    __tablename__ = "members"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[MemberRole] = mapped_column(
        Enum(MemberRole, native_enum=False, length=10), nullable=False, default=MemberRole.USER
    )
    shoe_size: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships
    addresses = relationship("Address", back_populates="member", cascade="all, delete-orphan", order_by="Address.id")
    refresh_tokens = relationship("RefreshToken", back_populates="member", cascade="all, delete-orphan")

    @property
    def is_admin(self) -> bool:
        return self.role == MemberRole.ADMIN


class Address(Base):
    """배송지 모델.

    Delivery address model. The base address cannot be deleted or unset;
    it only moves when another address is made base.
    """

    __tablename__ = "addresses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    member_id: Mapped[int] = mapped_column(Integer, ForeignKey("members.id", ondelete="CASCADE"), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)  # 수령인 (Recipient name)
    phone: Mapped[str] = mapped_column(String(30), nullable=False)
    address_line: Mapped[str] = mapped_column(String(255), nullable=False)
    detail: Mapped[str | None] = mapped_column(String(255), nullable=True)
    zip_code: Mapped[str] = mapped_column(String(10), nullable=False)
    is_base: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    member = relationship("Member", back_populates="addresses")
