# 회원가입 서비스 레이어
# - 필수값 체크, 이메일 중복 체크
# - 비밀번호 해싱 후 저장 (평문은 저장소로 전달되지 않음)

import logging

from fastapi import Depends
from fastapi.concurrency import run_in_threadpool

from ..core.config import settings
from ..core.exceptions import DuplicateEmailError, RegistrationValidationError
from ..core.security import PasswordHasher, password_hasher
from ..repositories.repository_factory import get_user_repository
from ..repositories.user_repository import UserStore
from ..schemas.user_schema import StoredUser

logger = logging.getLogger(__name__)


def normalize_email(email: str, case_sensitive: bool = None) -> str:
    if case_sensitive is None:
        case_sensitive = settings.EMAIL_CASE_SENSITIVE
    return email if case_sensitive else email.lower()


class AuthService:
    def __init__(self, repo: UserStore, hasher: PasswordHasher = None, email_case_sensitive: bool = None):
        self.repo = repo
        self.hasher = hasher or password_hasher
        self.email_case_sensitive = email_case_sensitive

    async def register(self, name: str, email: str, password: str) -> StoredUser:
        if not name or not email or not password:
            raise RegistrationValidationError()

        email = normalize_email(email, self.email_case_sensitive)

        existing = await self.repo.get_by_email(email)
        if existing:
            raise DuplicateEmailError(email)

        # bcrypt는 CPU를 오래 점유하므로 이벤트 루프 밖에서 실행
        digest = await run_in_threadpool(self.hasher.hash, password)
        user = await self.repo.create(name, email, digest)
        logger.info("Registered user id=%s email=%s", user.id, user.email)
        return user


def get_auth_service(repo: UserStore = Depends(get_user_repository)) -> AuthService:
    return AuthService(repo)
