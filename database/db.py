from sqlalchemy import create_engine, event             # SQLAlchemy 엔진 생성 도구
from sqlalchemy.orm import sessionmaker, declarative_base  # 세션 팩토리 / 모델 Base
from sqlalchemy.pool import StaticPool

from config.settings import settings               # ✅ 환경변수 설정 파일 불러오기


def _make_engine(url: str):
    # SQLite: 스레드풀에서 실행되는 라우터가 커넥션을 공유할 수 있도록 설정
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            # 인메모리 DB는 커넥션 하나를 공유해야 테이블이 유지됨
            kwargs["poolclass"] = StaticPool
        engine = create_engine(url, echo=settings.DB_ECHO, **kwargs)

        # SQLite는 기본적으로 FK 검사를 하지 않음
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    return create_engine(url, echo=settings.DB_ECHO, pool_pre_ping=True)


# ✅ 환경변수에서 DB 연결 URL을 불러와 엔진 생성
engine = _make_engine(settings.DATABASE_URL)

# ✅ 세션 팩토리: DB 연결에 사용할 세션 생성기 정의
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# ✅ 모델 정의 시 상속할 Base 클래스 (Declarative 방식 사용)
Base = declarative_base()


# ==========================================================
# [공통] DB 세션 관리
# - 요청마다 세션을 생성하고 응답 후 종료
# ==========================================================
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
