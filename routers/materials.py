from typing import List

from fastapi import APIRouter, Depends, status

from dependencies.resources import get_resource_service
from dependencies.security import require_teacher
from schemas.common import AUTH_ERROR_RESPONSES, RecordId
from schemas.materials import Material, MaterialCreate, MaterialSummary
from services.resource_service import ResourceService
from utils.security import TokenData

router = APIRouter(prefix="/classes/{class_id}/materials", tags=["수업 자료"], responses=AUTH_ERROR_RESPONSES)


# ✅ [READ] 학급별 자료 목록 (최신순)
@router.get("", response_model=List[MaterialSummary])
def read_materials(
    class_id: RecordId,
    teacher: TokenData = Depends(require_teacher),
    service: ResourceService = Depends(get_resource_service),
):
    return service.list_materials(class_id)


# ✅ [CREATE] 자료 추가 - 제목/본문 모두 필수
@router.post("", response_model=Material, status_code=status.HTTP_201_CREATED)
def create_material(
    class_id: RecordId,
    material: MaterialCreate,
    teacher: TokenData = Depends(require_teacher),
    service: ResourceService = Depends(get_resource_service),
):
    return service.create_material(class_id, material.title, material.content)
