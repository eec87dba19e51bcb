from fastapi import Depends
from sqlalchemy.orm import Session

from config.settings import settings
from database.db import get_db
from services.resource_service import ResourceService


def get_resource_service(db: Session = Depends(get_db)) -> ResourceService:
    # 요청마다 새 세션을 주입 (테스트에서는 인메모리 SQLite 로 교체 가능)
    # 학급 소유자 정책도 요청 시점의 settings 에서 읽음
    return ResourceService(
        db,
        owner_mode=settings.CLASS_OWNER_MODE,
        fixed_owner_username=settings.DEFAULT_TEACHER_USERNAME,
    )
