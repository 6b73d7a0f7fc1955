"""공통 응답 봉투 생성 유틸리티.

Uniform response envelope builders. Every endpoint answers with one of the
envelopes from shoestrade.schemas.result; failures reuse the same shape with
success=False and the domain error code.
"""

import math
from typing import Any, Sequence

from shoestrade.schemas.result import ListResult, PageResult, Result, SingleResult

SUCCESS_CODE: int = 0
SUCCESS_MESSAGE: str = "성공하였습니다."


def success_result() -> Result:
    return Result(success=True, code=SUCCESS_CODE, message=SUCCESS_MESSAGE)


def single_result(data: Any) -> SingleResult:
    return SingleResult(success=True, code=SUCCESS_CODE, message=SUCCESS_MESSAGE, data=data)


def list_result(items: Sequence[Any]) -> ListResult:
    return ListResult(success=True, code=SUCCESS_CODE, message=SUCCESS_MESSAGE, data=list(items))


def page_result(items: Sequence[Any], total: int, page: int, per_page: int) -> PageResult:
    """페이지 결과 봉투를 생성합니다.

    Build a paginated list envelope; ``pages`` is ceil(total / per_page).
    """
    return PageResult(
        success=True,
        code=SUCCESS_CODE,
        message=SUCCESS_MESSAGE,
        data=list(items),
        total=total,
        page=page,
        per_page=per_page,
        pages=math.ceil(total / per_page) if per_page else 0,
    )


def failure_result(code: int, message: str) -> Result:
    return Result(success=False, code=code, message=message)
