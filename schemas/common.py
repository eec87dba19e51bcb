"""
schemas/common.py

- 프로젝트 전반에서 재사용할 공용 스키마
- 에러 응답 표준: 모든 실패 응답은 {"message": "..."} 형태
"""

from typing import Annotated

from fastapi import Path
from pydantic import BaseModel, Field


# ✅ 경로 파라미터 ID: DB INTEGER(64bit) 범위를 벗어나면 DB 접근 전에 400
MAX_RECORD_ID = 2**63 - 1
RecordId = Annotated[int, Path(ge=1, le=MAX_RECORD_ID)]


class ErrorResponse(BaseModel):
    """
    전역 에러 핸들러에서 내려주는 표준 에러 응답
    - middlewares/error_handler.py 에서 이 형태로 리턴
    - 라우터의 responses= 에 지정해 Swagger 문서화에 사용
    """
    message: str = Field(..., description="사람이 읽을 수 있는 에러 메시지")


# 인증이 필요한 라우터 공통 에러 응답 문서
AUTH_ERROR_RESPONSES = {
    401: {"model": ErrorResponse, "description": "Authorization 헤더 없음"},
    403: {"model": ErrorResponse, "description": "토큰 위조/만료"},
    500: {"model": ErrorResponse, "description": "저장소 오류"},
}
