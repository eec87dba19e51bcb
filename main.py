from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from config.settings import settings

# ✅ 로깅 설정 (LOG_LEVEL 환경변수)
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
# HTTP 라이브러리 디버그 로그 비활성화
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


# ✅ 미들웨어 임포트
from middlewares.timing import TimingMiddleware
from middlewares.error_handler import add_error_handlers

# ✅ DB 초기화 (테이블 생성 + 기본 교사 계정)
from database.init_db import init_db

# ✅ 라우터 임포트
from routers import auth, classes, materials, students, student_updates

app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
)

# ✅ CORS 설정 (프론트엔드 연동)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ✅ 요청 지연 측정 미들웨어 (응답 헤더 X-Latency-Ms 추가)
app.add_middleware(TimingMiddleware)

# ✅ 전역 에러 핸들러 등록 (모든 실패는 {"message": ...})
add_error_handlers(app)

# ✅ /api 프리픽스 라우터 등록
app.include_router(auth.router,            prefix="/api")
app.include_router(classes.router,         prefix="/api")
app.include_router(materials.router,       prefix="/api")
app.include_router(students.router,        prefix="/api")
app.include_router(student_updates.router, prefix="/api")

# ✅ 헬스체크 엔드포인트
@app.get("/health")
def health_check():
    return {"status": "ok", "message": "API is running"}

@app.on_event("startup")
def _setup_database():
    init_db()
    logger.info(f"{settings.APP_TITLE} backend ready (env={settings.ENV})")

# ✅ 루트 엔드포인트
@app.get("/")
def root():
    return {"message": "SMIS Web Portal API"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT)
