from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey, func
from database.db import Base

class StudentUpdate(Base):
    __tablename__ = "student_updates"  # 학생별 진도/관찰 기록 (추가 전용)
    __table_args__ = {"sqlite_autoincrement": True}  # ID 재사용 방지

    id = Column(Integer, primary_key=True, index=True)                                    # 기록 고유 ID
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)   # 대상 학생 ID (FK)
    content = Column(Text, nullable=False)                                                # 기록 내용
    created_at = Column(DateTime, nullable=False, server_default=func.now())              # 작성 시각
