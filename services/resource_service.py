"""
services/resource_service.py

학급 / 자료 / 학생 / 학생 기록의 목록 조회·생성 로직.
- 입력 검증은 항상 DB 접근 전에 수행 (실패 시 ValidationError)
- 모든 쓰기는 단일 INSERT, 모든 조회는 단일 SELECT
- SQLAlchemy 예외는 롤백 후 로그에 남기고 StorageError 로 통일
"""

import logging
from contextlib import contextmanager
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from config.settings import settings
from models.classes import Class as ClassModel
from models.materials import Material as MaterialModel
from models.students import Student as StudentModel
from models.student_updates import StudentUpdate as StudentUpdateModel
from models.teachers import Teacher as TeacherModel
from services.errors import StorageError, ValidationError
from utils.security import TokenData

logger = logging.getLogger(__name__)


def _require_text(value: Optional[str], message: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(message)
    return str(value).strip()


class ResourceService:
    """요청 단위로 생성되며, 주입받은 DB 세션 하나만 사용한다."""

    def __init__(
        self,
        db: Session,
        owner_mode: Optional[str] = None,
        fixed_owner_username: Optional[str] = None,
    ):
        self.db = db
        # 생략 시 생성 시점의 settings 값을 사용
        self.owner_mode = owner_mode or settings.CLASS_OWNER_MODE
        self.fixed_owner_username = fixed_owner_username or settings.DEFAULT_TEACHER_USERNAME

    @contextmanager
    def _store_call(self, message: str):
        try:
            yield
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(message)
            raise StorageError(message)

    def _insert(self, record, message: str):
        with self._store_call(message):
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)
        return record

    # ==========================================================
    # 학급
    # ==========================================================

    def list_classes(self) -> List[ClassModel]:
        # 소유자 필터 없음: 모든 학급을 최신순으로
        with self._store_call("Server error fetching classes"):
            return (
                self.db.query(ClassModel)
                .order_by(ClassModel.created_at.desc(), ClassModel.id.desc())
                .all()
            )

    def _resolve_owner_id(self, caller: TokenData) -> int:
        if self.owner_mode != "fixed":
            return caller.id

        # 호환 모드: 항상 기본 교사 계정을 소유자로 사용
        with self._store_call("Server error adding class"):
            teacher = (
                self.db.query(TeacherModel)
                .filter(TeacherModel.username == self.fixed_owner_username)
                .first()
            )
        if teacher is None:
            logger.error(f"Fixed class owner not found: {self.fixed_owner_username}")
            raise StorageError("Server error adding class")
        return teacher.id

    def create_class(self, name: Optional[str], description: Optional[str], caller: TokenData) -> ClassModel:
        name = _require_text(name, "Class name is required")
        description = description.strip() if description and description.strip() else None

        owner_id = self._resolve_owner_id(caller)
        new_class = ClassModel(name=name, description=description, teacher_id=owner_id)
        return self._insert(new_class, "Server error adding class")

    # ==========================================================
    # 자료
    # ==========================================================

    def list_materials(self, class_id: int) -> List[MaterialModel]:
        with self._store_call("Server error fetching materials"):
            return (
                self.db.query(MaterialModel)
                .filter(MaterialModel.class_id == class_id)
                .order_by(MaterialModel.created_at.desc(), MaterialModel.id.desc())
                .all()
            )

    def create_material(self, class_id: int, title: Optional[str], content: Optional[str]) -> MaterialModel:
        title = _require_text(title, "Title and content are required")
        content = _require_text(content, "Title and content are required")

        material = MaterialModel(title=title, content=content, class_id=class_id)
        return self._insert(material, "Server error adding material")

    # ==========================================================
    # 학생 (이름 오름차순)
    # ==========================================================

    def list_students(self, class_id: int) -> List[StudentModel]:
        with self._store_call("Server error fetching students"):
            return (
                self.db.query(StudentModel)
                .filter(StudentModel.class_id == class_id)
                .order_by(StudentModel.name.asc(), StudentModel.id.asc())
                .all()
            )

    def create_student(self, class_id: int, name: Optional[str]) -> StudentModel:
        name = _require_text(name, "Student name is required")

        student = StudentModel(name=name, class_id=class_id)
        return self._insert(student, "Server error adding student")

    # ==========================================================
    # 학생 기록 (추가 전용)
    # ==========================================================

    def list_updates(self, student_id: int) -> List[StudentUpdateModel]:
        with self._store_call("Server error fetching student updates"):
            return (
                self.db.query(StudentUpdateModel)
                .filter(StudentUpdateModel.student_id == student_id)
                .order_by(StudentUpdateModel.created_at.desc(), StudentUpdateModel.id.desc())
                .all()
            )

    def create_update(self, student_id: int, content: Optional[str]) -> StudentUpdateModel:
        content = _require_text(content, "Update content is required")

        update = StudentUpdateModel(student_id=student_id, content=content)
        return self._insert(update, "Server error adding student update")
