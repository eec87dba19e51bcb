from pydantic import BaseModel
from typing import Optional

# ✅ 입력용 (POST)
class StudentCreate(BaseModel):
    name: Optional[str] = None               # 학생 이름 (필수)

# ✅ 목록 출력용
class StudentSummary(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True

# ✅ 생성 응답용
class Student(StudentSummary):
    class_id: int
