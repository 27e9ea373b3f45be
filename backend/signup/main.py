# FastAPI 진입점
# - 로깅 설정
# - Beanie ODM 초기화 (MongoDB)
# - 라우터 라우팅, 예외 핸들러
# - CORS 설정

import logging
from datetime import datetime, timezone

import uvicorn
from beanie import init_beanie
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from motor.motor_asyncio import AsyncIOMotorClient

from .api.v1.auth import router as auth_router
from .core.config import settings
from .core.exceptions import PersistenceError, RegistrationError, RegistrationValidationError
from .models.user import User

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# FastAPI 애플리케이션 인스턴스 생성
app = FastAPI(
    title="회원가입 서비스 API",
    description="이름/이메일/비밀번호로 사용자 등록",
    version="1.0.0"
)

# CORS 허용 도메인 세팅
origins = [o.strip() for o in settings.CORS_ALLOW_ORIGINS.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Beanie 초기화 (앱 시작 시 1회). init_beanie가 email unique 인덱스도 생성합니다.
@app.on_event("startup")
async def app_init():
    if settings.USER_REPOSITORY.lower() != "mongodb":
        logger.info("USER_REPOSITORY=%s, MongoDB 초기화 생략", settings.USER_REPOSITORY)
        return
    try:
        client = AsyncIOMotorClient(settings.MONGODB_URI, serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS)
        await client.admin.command('ping')

        db = client.get_default_database(settings.MONGODB_DATABASE)
        await init_beanie(database=db, document_models=[User])
        logger.info("MongoDB 연결 성공: database=%s", db.name)
    except Exception:
        # 연결 실패 시에도 서버는 시작됩니다. 회원가입 요청은 500으로 응답합니다.
        logger.exception("MongoDB 연결 실패. MONGODB_URI를 확인하세요.")


@app.exception_handler(RegistrationError)
async def registration_error_handler(request: Request, exc: RegistrationError):
    if isinstance(exc, PersistenceError):
        logger.error(
            "Persistence failure during %s on %s",
            exc.operation, request.url.path,
            exc_info=exc.__cause__ or exc,
        )
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


# 본문이 없거나 JSON 객체가 아닌 경우도 필수값 누락과 같은 400으로 응답
@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected request body on %s: %s", request.url.path, [e["loc"] for e in exc.errors()])
    return JSONResponse(
        status_code=RegistrationValidationError.status_code,
        content={"message": RegistrationValidationError.message},
    )


# 예상하지 못한 예외도 내부 정보 없이 일반 500 메시지로 응답하고 원인은 로그에만 남김
@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path, exc_info=exc)
    return JSONResponse(status_code=PersistenceError.status_code, content={"message": PersistenceError.message})


# 간단한 헬스체크
@app.get("/")
async def root():
    return {"ok": True, "app": settings.APP_NAME, "time": datetime.now(tz=timezone.utc).isoformat()}

@app.get("/health")
async def health_check():
    return {"status": "ok", "app": settings.APP_NAME, "version": "1.0.0"}

app.include_router(auth_router)


def run():
    uvicorn.run("signup.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
