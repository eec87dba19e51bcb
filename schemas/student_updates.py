from datetime import datetime
from pydantic import BaseModel
from typing import Optional


class StudentUpdateCreate(BaseModel):
    content: Optional[str] = None            # 기록 내용 (필수)


class StudentUpdateSummary(BaseModel):
    id: int
    content: str
    created_at: datetime

    class Config:
        from_attributes = True


class StudentUpdate(StudentUpdateSummary):
    student_id: int
