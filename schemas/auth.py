from pydantic import BaseModel
from typing import Optional

# ✅ 요청 형식 정의
# 필드 누락도 "Invalid credentials" 로 응답하기 위해 Optional 로 받음
class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None

# ✅ 응답 형식 정의
class LoginResponse(BaseModel):
    message: str
    username: str
    token: str
