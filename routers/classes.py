from typing import List

from fastapi import APIRouter, Depends, status

from dependencies.resources import get_resource_service
from dependencies.security import require_teacher
from schemas.classes import Class, ClassCreate, ClassSummary
from schemas.common import AUTH_ERROR_RESPONSES
from services.resource_service import ResourceService
from utils.security import TokenData

router = APIRouter(prefix="/classes", tags=["classes"], responses=AUTH_ERROR_RESPONSES)


# ✅ [READ] 전체 학급 조회 (최신순)
@router.get("", response_model=List[ClassSummary])
def read_classes(
    teacher: TokenData = Depends(require_teacher),
    service: ResourceService = Depends(get_resource_service),
):
    return service.list_classes()


# ✅ [CREATE] 학급 추가
# - 소유 교사는 CLASS_OWNER_MODE 에 따라 결정 (caller / fixed)
@router.post("", response_model=Class, status_code=status.HTTP_201_CREATED)
def create_class(
    new_class: ClassCreate,
    teacher: TokenData = Depends(require_teacher),
    service: ResourceService = Depends(get_resource_service),
):
    return service.create_class(new_class.name, new_class.description, teacher)
