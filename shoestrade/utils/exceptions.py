"""도메인 예외 클래스 및 오류 코드 테이블 모듈.

Domain exception classes and the error code table.
Every failure a client can observe is a ShoesTradeError subclass bound to one
ErrorCode entry. The exception handler registered in main.py renders them as
failure envelopes (HTTP 200, success=false), so callers branch on the
envelope's ``code`` rather than on the transport status.

Usage:
    from shoestrade.utils.exceptions import ProductNotFoundError
    raise ProductNotFoundError(product_id)
"""

from enum import Enum


class ErrorCode(Enum):
    """오류 코드 테이블 — (코드, 메시지 템플릿).

    Fixed lookup table of (signed code, message template). Member, auth,
    address and token failures have their own negative or 1000-range codes;
    the catalog and trade family shares code -1 and builds its message from
    the offending identifier via ``{detail}``.
    """

    MEMBER_DUPLICATE_EMAIL = (-100, "이미 회원가입된 이메일 입니다.")
    MEMBER_NOT_FOUND = (-102, "존재하지 않은 회원입니다.")
    WRONG_EMAIL = (-103, "아이디가 틀렸습니다.")
    WRONG_PASSWORD = (-104, "비밀번호가 틀렸습니다.")
    ADDRESS_NOT_FOUND = (-105, "존재하지 않는 주소입니다.")
    BASE_ADDRESS_NOT_DELETE = (-106, "기본 주소는 삭제할 수 없습니다.")
    BASE_ADDRESS_UNCHECKED = (-106, "기본 주소는 해제할 수 없습니다.")
    INVALID_REFRESH_TOKEN = (-107, "refreshToken이 일치하지 않습니다.")
    EXPIRED_REFRESH_TOKEN = (-108, "refreshToken이 만료되었습니다.")
    NUMBER_FORMAT = (-109, "입력값이 int형이 아닙니다.")
    TOKEN_NOT_FOUND = (1000, "토큰이 존재하지 않습니다.")
    INVALID_TOKEN = (1001, "변조된 토큰입니다.")
    EXPIRED_TOKEN = (1002, "만료된 토큰입니다.")
    ACCESS_DENIED = (1003, "접근 권한이 없습니다.")

    BRAND_DUPLICATE = (-1, "{detail} : 이미 존재하는 브랜드 이름입니다.")
    BRAND_NOT_FOUND = (-1, "{detail} : 해당 id의 브랜드를 찾을 수 없습니다.")
    PRODUCT_DUPLICATE = (-1, "{detail} : 이미 존재하는 상품 이름입니다.")
    PRODUCT_NOT_FOUND = (-1, "{detail} : 해당 id의 상품을 찾을 수 없습니다.")
    PRODUCT_IMAGE_DUPLICATE = (-1, "이미지 이름 ({detail}) 이 중복됩니다.")
    PRODUCT_IMAGE_NOT_FOUND = (-1, "{detail} : 해당 id의 이미지를 찾을 수 없습니다.")
    PRODUCT_SIZE_NOT_FOUND = (-1, "{detail} : 해당 id의 신발사이즈를 찾을 수 없습니다.")
    TRADE_NOT_FOUND = (-1, "{detail} : 해당 입찰 내역을 찾을 수 없습니다.")

    REQUEST_VALIDATION = (-9999, "요청 값이 올바르지 않습니다.")

    def __init__(self, code: int, template: str) -> None:
        self.code: int = code
        self.template: str = template


class ShoesTradeError(Exception):
    """모든 도메인 예외의 부모 클래스.

    Base class for domain errors. Subclasses pin ``error_code``; the optional
    ``detail`` is the offending identifier (id, name, joined names) and is
    substituted into the message template.

    Args:
        detail: 오류 대상 식별자 (Offending identifier, optional)
    """

    error_code: ErrorCode = ErrorCode.REQUEST_VALIDATION

    def __init__(self, detail: object = "") -> None:
        self.detail: str = str(detail)
        super().__init__(self.message)

    @property
    def code(self) -> int:
        return self.error_code.code

    @property
    def message(self) -> str:
        return self.error_code.template.format(detail=self.detail)


# === 회원 / 주소 (Member / Address) ===

class MemberDuplicationEmailError(ShoesTradeError):
    error_code = ErrorCode.MEMBER_DUPLICATE_EMAIL


class MemberNotFoundError(ShoesTradeError):
    error_code = ErrorCode.MEMBER_NOT_FOUND


class WrongEmailError(ShoesTradeError):
    error_code = ErrorCode.WRONG_EMAIL


class WrongPasswordError(ShoesTradeError):
    error_code = ErrorCode.WRONG_PASSWORD


class AddressNotFoundError(ShoesTradeError):
    error_code = ErrorCode.ADDRESS_NOT_FOUND


class BaseAddressNotDeleteError(ShoesTradeError):
    """기본 주소 삭제 시도 (Attempt to delete the base address)."""

    error_code = ErrorCode.BASE_ADDRESS_NOT_DELETE


class BaseAddressUncheckedError(ShoesTradeError):
    """기본 주소 해제 시도 (Attempt to unset the base address)."""

    error_code = ErrorCode.BASE_ADDRESS_UNCHECKED


class NumberFormatError(ShoesTradeError):
    """숫자가 아닌 사이즈 입력 (Non-integer size input)."""

    error_code = ErrorCode.NUMBER_FORMAT


# === 인증 / 토큰 (Auth / Token) ===

class InvalidRefreshTokenError(ShoesTradeError):
    error_code = ErrorCode.INVALID_REFRESH_TOKEN


class ExpiredRefreshTokenError(ShoesTradeError):
    error_code = ErrorCode.EXPIRED_REFRESH_TOKEN


class TokenNotFoundError(ShoesTradeError):
    error_code = ErrorCode.TOKEN_NOT_FOUND


class InvalidTokenError(ShoesTradeError):
    """서명 불일치 또는 형식 오류 토큰 (Bad signature or malformed token)."""

    error_code = ErrorCode.INVALID_TOKEN


class ExpiredTokenError(ShoesTradeError):
    error_code = ErrorCode.EXPIRED_TOKEN


class AccessDeniedError(ShoesTradeError):
    error_code = ErrorCode.ACCESS_DENIED


# === 카탈로그 / 입찰 (Catalog / Trade) ===

class BrandDuplicationError(ShoesTradeError):
    error_code = ErrorCode.BRAND_DUPLICATE


class BrandNotFoundError(ShoesTradeError):
    error_code = ErrorCode.BRAND_NOT_FOUND


class ProductDuplicationError(ShoesTradeError):
    error_code = ErrorCode.PRODUCT_DUPLICATE


class ProductNotFoundError(ShoesTradeError):
    error_code = ErrorCode.PRODUCT_NOT_FOUND


class ProductImageDuplicationError(ShoesTradeError):
    """중복 이미지 이름 — detail은 공백으로 연결된 이름 목록.

    Duplicate image names; ``detail`` is every colliding name, space-joined.
    """

    error_code = ErrorCode.PRODUCT_IMAGE_DUPLICATE


class ProductImageNotFoundError(ShoesTradeError):
    error_code = ErrorCode.PRODUCT_IMAGE_NOT_FOUND


class ProductSizeNotFoundError(ShoesTradeError):
    error_code = ErrorCode.PRODUCT_SIZE_NOT_FOUND


class TradeNotFoundError(ShoesTradeError):
    error_code = ErrorCode.TRADE_NOT_FOUND
