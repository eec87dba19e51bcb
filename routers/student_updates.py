from typing import List

from fastapi import APIRouter, Depends, status

from dependencies.resources import get_resource_service
from dependencies.security import require_teacher
from schemas.common import AUTH_ERROR_RESPONSES, RecordId
from schemas.student_updates import StudentUpdate, StudentUpdateCreate, StudentUpdateSummary
from services.resource_service import ResourceService
from utils.security import TokenData

router = APIRouter(prefix="/students/{student_id}/updates", tags=["학생 기록"], responses=AUTH_ERROR_RESPONSES)


# ✅ [READ] 학생별 기록 (최신순)
@router.get("", response_model=List[StudentUpdateSummary])
def read_student_updates(
    student_id: RecordId,
    teacher: TokenData = Depends(require_teacher),
    service: ResourceService = Depends(get_resource_service),
):
    return service.list_updates(student_id)


# ✅ [CREATE] 기록 추가 (수정/삭제 없음)
@router.post("", response_model=StudentUpdate, status_code=status.HTTP_201_CREATED)
def create_student_update(
    student_id: RecordId,
    update: StudentUpdateCreate,
    teacher: TokenData = Depends(require_teacher),
    service: ResourceService = Depends(get_resource_service),
):
    return service.create_update(student_id, update.content)
