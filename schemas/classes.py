from datetime import datetime
from pydantic import BaseModel
from typing import Optional

# ✅ 생성(Create) 요청용 스키마
# → id, teacher_id, created_at 은 서버에서 채우므로 제외
# → 공백 검사는 ResourceService 에서 수행 (400 + message)
class ClassCreate(BaseModel):
    name: Optional[str] = None              # 학급 이름 (필수, 공백 불가)
    description: Optional[str] = None       # 설명 (선택)


# ✅ 목록 조회용 스키마
class ClassSummary(BaseModel):
    id: int
    name: str
    description: Optional[str] = None

    class Config:
        from_attributes = True


# ✅ 생성 응답용 스키마 (서버가 채운 값까지 모두 포함)
class Class(ClassSummary):
    teacher_id: int
    created_at: datetime
