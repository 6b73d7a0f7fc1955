"""브랜드 관련 Pydantic 요청/응답 스키마 정의.

Brand request/response schema definitions.
"""

from pydantic import BaseModel, Field


class BrandSaveRequest(BaseModel):
    """브랜드 등록/수정 요청 스키마 (Brand create/rename request)."""

    name: str = Field(min_length=1, max_length=100)  # 브랜드 이름 (Brand name)


class BrandResponse(BaseModel):
    """브랜드 응답 스키마 (Brand response)."""

    id: int
    name: str
