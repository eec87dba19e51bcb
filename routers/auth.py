from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from schemas.auth import LoginRequest, LoginResponse
from schemas.common import ErrorResponse
from services.auth_service import authenticate

router = APIRouter(tags=["인증"])


# ✅ [LOGIN] 로그인 API - 토큰 없이 호출 가능한 유일한 API
@router.post(
    "/login",
    response_model=LoginResponse,
    responses={400: {"model": ErrorResponse, "description": "Invalid credentials"}},
)
def login(request: LoginRequest, db: Session = Depends(get_db)):
    return authenticate(db, request.username, request.password)
