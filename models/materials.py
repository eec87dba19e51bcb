from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, func
from database.db import Base

class Material(Base):
    __tablename__ = "materials"  # 학급별 수업 자료 테이블
    __table_args__ = {"sqlite_autoincrement": True}  # ID 재사용 방지

    id = Column(Integer, primary_key=True, index=True)                          # 자료 고유 ID
    title = Column(String(255), nullable=False)                                 # 자료 제목
    content = Column(Text, nullable=False)                                      # 자료 본문
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=False, index=True)  # 소속 학급 ID
    created_at = Column(DateTime, nullable=False, server_default=func.now())    # 등록 시각
