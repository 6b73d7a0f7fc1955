"""회원/주소 관련 Pydantic 요청/응답 스키마 정의.

Member and address request/response schema definitions.
"""

from pydantic import BaseModel, Field

from shoestrade.models.member import MemberRole


class MemberResponse(BaseModel):
    """회원 정보 응답 스키마 (Member profile)."""

    id: int
    email: str
    role: MemberRole
    shoe_size: int | None = None


class ShoeSizeRequest(BaseModel):
    """신발 사이즈 변경 요청 스키마.

    Shoe size change request. The value arrives as a string and must parse
    as an integer.
    """

    shoe_size: str


class AddressRequest(BaseModel):
    """배송지 등록/수정 요청 스키마 (Address create/update request)."""

    name: str = Field(min_length=1, max_length=100)
    phone: str = Field(min_length=1, max_length=30)
    address_line: str = Field(min_length=1, max_length=255)
    detail: str | None = Field(default=None, max_length=255)
    zip_code: str = Field(min_length=1, max_length=10)


class AddressResponse(BaseModel):
    """배송지 응답 스키마 (Address)."""

    id: int
    name: str
    phone: str
    address_line: str
    detail: str | None = None
    zip_code: str
    is_base: bool
