from sqlalchemy import Column, Integer, String, ForeignKey
from database.db import Base

class Student(Base):
    __tablename__ = "students"  # 학생 기본 정보 테이블
    __table_args__ = {"sqlite_autoincrement": True}  # ID 재사용 방지

    id = Column(Integer, primary_key=True, index=True)                                # 고유 학생 ID (Primary Key)
    name = Column(String(255), nullable=False)                                        # 학생 이름
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=False, index=True)  # 소속 반 ID (FK)
