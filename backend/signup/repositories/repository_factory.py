# 사용자 저장소 선택
# - USER_REPOSITORY 설정에 따라 구현체 생성
#   "mongodb": UserRepository (startup에서 init_beanie 필요)
#   "inmemory": InMemoryUserRepository

from typing import Optional

from ..core.config import settings
from .in_memory_user_repository import InMemoryUserRepository
from .user_repository import UserRepository, UserStore


def create_user_repository(repo_type: str = None) -> UserStore:
    repo_type = (repo_type or settings.USER_REPOSITORY).lower()

    if repo_type == "mongodb":
        return UserRepository()
    elif repo_type == "inmemory":
        return InMemoryUserRepository()
    else:
        raise ValueError(
            f"Invalid USER_REPOSITORY value: {repo_type}. "
            "Expected 'inmemory' or 'mongodb'"
        )


_user_repository: Optional[UserStore] = None


def get_user_repository() -> UserStore:
    # FastAPI 의존성. 프로세스 전체에서 하나의 저장소를 공유
    global _user_repository

    if _user_repository is None:
        _user_repository = create_user_repository()

    return _user_repository


def reset_user_repository() -> None:
    global _user_repository
    _user_repository = None
