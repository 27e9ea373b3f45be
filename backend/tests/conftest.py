# 공용 pytest fixture
# - 설정은 import 시점에 읽히므로 signup 모듈을 불러오기 전에 테스트용 환경변수를 지정합니다.
import os

os.environ.setdefault("USER_REPOSITORY", "inmemory")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest

from signup.core.security import PasswordHasher
from signup.repositories.in_memory_user_repository import InMemoryUserRepository
from signup.services.auth_service import AuthService


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture
def repo():
    return InMemoryUserRepository()


@pytest.fixture
def service(repo, hasher):
    return AuthService(repo, hasher)
