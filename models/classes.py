from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from database.db import Base

class Class(Base):
    __tablename__ = "classes"
    __table_args__ = {"sqlite_autoincrement": True}  # ID 재사용 방지

    id = Column(Integer, primary_key=True, index=True)      # 학급 고유 ID (PK)
    name = Column(String(255), nullable=False)              # 학급 이름 (예: Grade 10 English)
    description = Column(Text)                              # 설명 (선택)

    # ✅ 소유 교사 ID (FK) - teachers.id 참조
    teacher_id = Column(Integer, ForeignKey("teachers.id"), nullable=False)

    # 생성 시각: INSERT 시 DB가 한 번만 채움
    created_at = Column(DateTime, nullable=False, server_default=func.now())

    # ==========================================================
    # [관계 설정]
    # ==========================================================
    teacher = relationship(
        "Teacher",
        back_populates="classes",
        foreign_keys=[teacher_id]
    )
