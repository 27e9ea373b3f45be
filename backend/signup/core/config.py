# 설정 모듈
# - .env 값들을 한 곳에서 관리
# - 기본값을 제공하여 로컬 실행 편의성 확보

from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# 프로젝트 루트 디렉토리 경로 찾기
# 이 파일은 backend/signup/core/config.py에 있으므로 3단계 상위가 프로젝트 루트입니다.
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
ENV_FILE_PATH = PROJECT_ROOT / ".env"

class Settings(BaseSettings):
    APP_NAME: str = "signup"
    ENV: str = "dev"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    # MONGO_URL은 이전 배포 환경에서 쓰던 이름입니다.
    MONGODB_URI: str = Field(
        default="mongodb://localhost:27017/signup",
        validation_alias=AliasChoices("MONGODB_URI", "MONGO_URL"),
    )
    # URI에 데이터베이스 이름이 없을 때 사용
    MONGODB_DATABASE: str = "signup"
    MONGODB_TIMEOUT_MS: int = 5000

    # "mongodb" | "inmemory"
    USER_REPOSITORY: str = "mongodb"

    # bcrypt cost factor (log2 rounds). 높을수록 느리고 무차별 대입에 강합니다.
    BCRYPT_ROUNDS: int = Field(default=12, ge=4, le=31)

    # False이면 이메일을 소문자로 정규화하여 대소문자 구분 없이 중복을 판단합니다.
    EMAIL_CASE_SENSITIVE: bool = True

    CORS_ALLOW_ORIGINS: str = "http://localhost:3000"

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE_PATH) if ENV_FILE_PATH.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
