from typing import Optional, Annotated
from fastapi import Header

from services.errors import Unauthenticated
from utils.security import TokenData, decode_access_token

AuthHeader = Annotated[Optional[str], Header(alias="Authorization")]


def require_teacher(authorization: AuthHeader = None) -> TokenData:
    """
    모든 리소스 라우터 앞단의 인증 게이트.
    - 헤더/토큰 없음 → 401 (Unauthenticated)
    - 서명 불일치·만료 → 403 (InvalidToken)
    검증에 실패하면 라우터 본문(DB 접근)까지 가지 않는다.
    """
    if not authorization:
        raise Unauthenticated("Missing Authorization header")

    # "Bearer <token>" 파싱
    parts = authorization.split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer" or not parts[1].strip():
        raise Unauthenticated("Missing bearer token")

    return decode_access_token(parts[1].strip())
