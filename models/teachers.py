from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from database.db import Base
from models.classes import Class   # ✅ Class 직접 import (관계 설정용)

class Teacher(Base):
    __tablename__ = "teachers"
    __table_args__ = {"sqlite_autoincrement": True}  # ID 재사용 방지

    id = Column(Integer, primary_key=True, index=True)                   # 교사 고유 ID (PK)
    username = Column(String(255), unique=True, nullable=False, index=True)  # 로그인 아이디
    password_hash = Column(String(255), nullable=False)                  # bcrypt 해시 (평문 저장 금지)

    # ✅ 이 교사가 소유한 학급들 (1:N 관계)
    classes = relationship(
        "Class",
        back_populates="teacher",
        foreign_keys=[Class.teacher_id]
    )
