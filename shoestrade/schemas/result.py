"""공통 응답 봉투 스키마 정의.

Uniform response envelope schemas.
All envelopes share success/code/message; single-value and list-value
results add ``data``, and paginated lists add page metadata.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Result(BaseModel):
    """기본 응답 봉투 (Base envelope).

    Attributes:
        success: 처리 성공 여부 (Whether the request succeeded)
        code: 결과 코드, 성공 시 0 (Result code, 0 on success)
        message: 결과 메시지 (Human readable message)
    """

    success: bool
    code: int
    message: str


class SingleResult(Result, Generic[T]):
    """단일 값 응답 봉투 (Single-value envelope)."""

    data: T | None = None


class ListResult(Result, Generic[T]):
    """목록 응답 봉투 (List-value envelope)."""

    data: list[T] = []


class PageResult(ListResult[T], Generic[T]):
    """페이지 목록 응답 봉투.

    Paginated list envelope.

    Attributes:
        total: 전체 항목 수 (Total item count)
        page: 현재 페이지 번호 — 1부터 시작 (Current page, 1-indexed)
        per_page: 페이지당 항목 수 (Items per page)
        pages: 전체 페이지 수 (Total pages)
    """

    total: int = 0
    page: int = 1
    per_page: int = 20
    pages: int = 0
