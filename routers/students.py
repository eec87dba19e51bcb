from typing import List

from fastapi import APIRouter, Depends, status

from dependencies.resources import get_resource_service
from dependencies.security import require_teacher
from schemas.common import AUTH_ERROR_RESPONSES, RecordId
from schemas.students import Student, StudentCreate, StudentSummary
from services.resource_service import ResourceService
from utils.security import TokenData

router = APIRouter(prefix="/classes/{class_id}/students", tags=["학생 정보"], responses=AUTH_ERROR_RESPONSES)


# ✅ [READ] 반 학생 목록 - 이름 오름차순
@router.get("", response_model=List[StudentSummary])
def read_students(
    class_id: RecordId,
    teacher: TokenData = Depends(require_teacher),
    service: ResourceService = Depends(get_resource_service),
):
    return service.list_students(class_id)


# ✅ [CREATE] 학생 추가
@router.post("", response_model=Student, status_code=status.HTTP_201_CREATED)
def create_student(
    class_id: RecordId,
    student: StudentCreate,
    teacher: TokenData = Depends(require_teacher),
    service: ResourceService = Depends(get_resource_service),
):
    return service.create_student(class_id, student.name)
