from datetime import datetime
from pydantic import BaseModel
from typing import Optional


# ==========================================================
# [입력용 스키마]
# ==========================================================
class MaterialCreate(BaseModel):
    title: Optional[str] = None              # 제목 (필수)
    content: Optional[str] = None            # 본문 (필수)


# ==========================================================
# [출력용 스키마]
# ==========================================================
class MaterialSummary(BaseModel):
    id: int
    title: str
    content: str
    created_at: datetime

    class Config:
        from_attributes = True


class Material(MaterialSummary):
    class_id: int                            # 소속 학급 ID
