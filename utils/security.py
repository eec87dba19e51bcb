from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt
from passlib.context import CryptContext
from pydantic import BaseModel

from config.settings import settings
from services.errors import InvalidToken

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


# ✅ 토큰에서 복원되는 교사 신원
class TokenData(BaseModel):
    id: int
    username: str
    iat: int
    exp: int


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, password_hash: str) -> bool:
    return pwd_context.verify(plain_password, password_hash)


def create_access_token(teacher_id: int, username: str, expires_delta: Optional[timedelta] = None) -> str:
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.JWT_EXPIRES_MINUTES)
    now = datetime.now(timezone.utc)
    payload: Dict[str, Any] = {
        "id": teacher_id,
        "username": username,
        "iat": int(now.timestamp()),
        "exp": int((now + expires_delta).timestamp()),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> TokenData:
    """
    서명과 만료를 검사하고 TokenData 로 변환한다.
    실패 사유(만료/위조/형식 오류)와 무관하게 InvalidToken 을 던진다.
    """
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise InvalidToken("Token has expired")
    except jwt.InvalidTokenError:
        raise InvalidToken("Invalid token")

    try:
        return TokenData(**payload)
    except ValueError:
        # 서명은 맞지만 id/username 이 빠진 토큰
        raise InvalidToken("Invalid token")
