import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.teachers import Teacher as TeacherModel
from services.errors import InvalidCredentials, StorageError
from utils.security import create_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)


def authenticate(db: Session, username: Optional[str], password: Optional[str]) -> dict:
    """
    아이디/비밀번호 확인 후 1시간짜리 토큰 발급.
    - 계정 없음 / 비밀번호 불일치 / 입력 누락 모두 InvalidCredentials (400)
    """
    if not username or not password:
        raise InvalidCredentials()

    try:
        teacher = db.query(TeacherModel).filter(TeacherModel.username == username).first()
    except SQLAlchemyError:
        logger.exception("Login error")
        raise StorageError("Server error during login")

    if teacher is None or not verify_password(password, teacher.password_hash):
        logger.info(f"Login failed: username={username}")
        raise InvalidCredentials()

    token = create_access_token(teacher.id, teacher.username)
    logger.info(f"Login successful: username={teacher.username}")
    return {"message": "Login successful", "username": teacher.username, "token": token}


def create_teacher(db: Session, username: str, password: str) -> TeacherModel:
    """
    교사 계정 생성 (공개 API 없음 - 기동 시 기본 계정 / scripts/create_teacher.py 에서만 사용)
    이미 존재하는 아이디면 기존 계정은 그대로 두고 ValueError.
    """
    if db.query(TeacherModel).filter(TeacherModel.username == username).first():
        raise ValueError(f"Teacher already exists: {username}")

    teacher = TeacherModel(username=username, password_hash=hash_password(password))
    db.add(teacher)
    db.commit()
    db.refresh(teacher)
    return teacher
