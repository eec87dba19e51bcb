"""
services/errors.py

포털 전역에서 사용하는 예외 계층.
- 각 예외는 HTTP 상태 코드와 사용자에게 보여줄 message 를 가진다.
- middlewares/error_handler.py 에서 {"message": ...} JSON 으로 변환된다.
"""

from typing import Dict, Optional


class PortalError(Exception):
    status_code = 500
    default_message = "Server error"
    # 응답에 함께 실을 HTTP 헤더 (없으면 None)
    headers: Optional[Dict[str, str]] = None

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(PortalError):
    """필수 입력값 누락/공백"""
    status_code = 400
    default_message = "Invalid input"


class InvalidCredentials(PortalError):
    status_code = 400
    default_message = "Invalid credentials"


class Unauthenticated(PortalError):
    """Authorization 헤더(토큰) 자체가 없음"""
    status_code = 401
    default_message = "Authentication required"
    headers = {"WWW-Authenticate": "Bearer"}


class InvalidToken(PortalError):
    """서명 불일치 / 형식 오류 / 만료"""
    status_code = 403
    default_message = "Invalid or expired token"


class StorageError(PortalError):
    # 원인은 서버 로그에만 남기고 호출자에게는 일반 메시지만 노출
    status_code = 500
    default_message = "Server error"
