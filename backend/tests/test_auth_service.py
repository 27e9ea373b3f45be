# 회원가입 서비스 테스트 (InMemoryUserRepository 사용, DB 의존성 없음)
import asyncio
from unittest.mock import AsyncMock

import pytest

from signup.core.exceptions import DuplicateEmailError, PersistenceError, RegistrationValidationError
from signup.services.auth_service import AuthService, normalize_email


def test_register_stores_hashed_password(service, repo, hasher):
    user = asyncio.run(service.register("Jane Doe", "jane@example.com", "password123"))
    assert user.id
    assert user.name == "Jane Doe"
    assert user.email == "jane@example.com"
    assert user.password != "password123"
    assert hasher.verify("password123", user.password)
    assert repo.count() == 1


def test_register_duplicate_email(service, repo):
    asyncio.run(service.register("Jane Doe", "jane@example.com", "password123"))
    with pytest.raises(DuplicateEmailError) as exc_info:
        asyncio.run(service.register("Someone Else", "jane@example.com", "other-pass"))
    assert exc_info.value.message == "Email is already registered."
    assert exc_info.value.status_code == 400
    assert repo.count() == 1
    stored = asyncio.run(repo.get_by_email("jane@example.com"))
    assert stored.name == "Jane Doe"


@pytest.mark.parametrize(
    "name, email, password",
    [
        ("", "jane@example.com", "password123"),
        ("Jane Doe", "", "password123"),
        ("Jane Doe", "jane@example.com", ""),
        (None, "jane@example.com", "password123"),
        ("Jane Doe", None, "password123"),
        ("Jane Doe", "jane@example.com", None),
    ],
)
def test_register_requires_all_fields(service, repo, name, email, password):
    with pytest.raises(RegistrationValidationError) as exc_info:
        asyncio.run(service.register(name, email, password))
    assert exc_info.value.message == "All fields are required."
    assert repo.count() == 0


def test_validation_happens_before_store_access(hasher):
    repo = AsyncMock()
    service = AuthService(repo, hasher)
    with pytest.raises(RegistrationValidationError):
        asyncio.run(service.register("Jane Doe", "", "password123"))
    repo.get_by_email.assert_not_called()
    repo.create.assert_not_called()


def test_register_reads_once_and_writes_digest(hasher):
    repo = AsyncMock()
    repo.get_by_email.return_value = None
    service = AuthService(repo, hasher)
    asyncio.run(service.register("Jane Doe", "jane@example.com", "password123"))

    repo.get_by_email.assert_awaited_once_with("jane@example.com")
    repo.create.assert_awaited_once()
    name, email, digest = repo.create.await_args.args
    assert (name, email) == ("Jane Doe", "jane@example.com")
    assert hasher.verify("password123", digest)
    assert digest.encode() != "password123"


def test_race_lost_at_insert_is_duplicate(hasher):
    # 사전 조회는 통과했지만 저장 시점에 unique 인덱스 위반
    repo = AsyncMock()
    repo.get_by_email.return_value = None
    repo.create.side_effect = DuplicateEmailError("jane@example.com")
    service = AuthService(repo, hasher)
    with pytest.raises(DuplicateEmailError):
        asyncio.run(service.register("Jane Doe", "jane@example.com", "password123"))


def test_persistence_error_propagates_without_retry(hasher):
    repo = AsyncMock()
    repo.get_by_email.return_value = None
    repo.create.side_effect = PersistenceError("create")
    service = AuthService(repo, hasher)
    with pytest.raises(PersistenceError):
        asyncio.run(service.register("Jane Doe", "jane@example.com", "password123"))
    assert repo.create.await_count == 1


def test_concurrent_registrations_store_one_record(service, repo):
    async def register_twice():
        return await asyncio.gather(
            service.register("Jane Doe", "jane@example.com", "password123"),
            service.register("Jane Again", "jane@example.com", "password456"),
            return_exceptions=True,
        )

    results = asyncio.run(register_twice())
    errors = [r for r in results if isinstance(r, Exception)]
    assert len(errors) == 1
    assert isinstance(errors[0], DuplicateEmailError)
    assert repo.count() == 1


def test_email_case_sensitive_by_default(service, repo):
    asyncio.run(service.register("Jane Doe", "jane@example.com", "password123"))
    user = asyncio.run(service.register("Jane Doe", "Jane@Example.com", "password123"))
    assert user.email == "Jane@Example.com"
    assert repo.count() == 2


def test_email_case_insensitive_policy(repo, hasher):
    service = AuthService(repo, hasher, email_case_sensitive=False)
    user = asyncio.run(service.register("Jane Doe", "Jane@Example.com", "password123"))
    assert user.email == "jane@example.com"
    with pytest.raises(DuplicateEmailError):
        asyncio.run(service.register("Jane Doe", "JANE@example.com", "password123"))
    assert repo.count() == 1


def test_normalize_email():
    assert normalize_email("Jane@Example.com", case_sensitive=True) == "Jane@Example.com"
    assert normalize_email("Jane@Example.com", case_sensitive=False) == "jane@example.com"
