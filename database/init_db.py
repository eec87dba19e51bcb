import logging

from sqlalchemy.orm import Session

from config.settings import settings
from database.db import Base, engine as default_engine
# ✅ create_all 대상 테이블 등록 (import 만으로 Base.metadata 에 올라감)
from models import classes, materials, students, student_updates, teachers  # noqa: F401
from models.teachers import Teacher as TeacherModel
from services.auth_service import create_teacher

logger = logging.getLogger(__name__)


def init_db(engine=None) -> None:
    """
    테이블 생성 + 기본 교사 계정 준비 (여러 번 실행해도 안전)
    """
    engine = engine or default_engine
    Base.metadata.create_all(bind=engine)

    username = settings.DEFAULT_TEACHER_USERNAME
    with Session(engine) as db:
        exists = db.query(TeacherModel).filter(TeacherModel.username == username).first()
        if exists is None:
            create_teacher(db, username, settings.DEFAULT_TEACHER_PASSWORD)
            logger.info(f"Default teacher created: {username}")
