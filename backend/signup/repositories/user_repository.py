# 사용자 저장소 레이어
# - 데이터 접근(조회/생성)만 담당 (서비스 로직 분리)
# - pymongo/beanie 예외를 도메인 예외로 변환

from typing import Optional, Protocol

from beanie.exceptions import CollectionWasNotInitialized
from pymongo.errors import DuplicateKeyError, PyMongoError

from ..core.exceptions import DuplicateEmailError, PersistenceError
from ..core.security import PasswordDigest
from ..models.user import User
from ..schemas.user_schema import StoredUser

_STORE_ERRORS = (PyMongoError, CollectionWasNotInitialized)


class UserStore(Protocol):
    """AuthService가 사용하는 저장소 계약"""

    async def get_by_email(self, email: str) -> Optional[StoredUser]: ...

    async def create(self, name: str, email: str, digest: PasswordDigest) -> StoredUser: ...


def _to_stored(user: User) -> StoredUser:
    return StoredUser(
        id=str(user.id),
        name=user.name,
        email=user.email,
        password=user.password,
        created_at=user.created_at,
    )


class UserRepository:
    """MongoDB(Beanie) 구현. init_beanie 이후에만 동작합니다."""

    async def get_by_email(self, email: str) -> Optional[StoredUser]:
        try:
            user = await User.find_one({"email": email})
        except _STORE_ERRORS as e:
            raise PersistenceError("get_by_email") from e
        return _to_stored(user) if user else None

    async def create(self, name: str, email: str, digest: PasswordDigest) -> StoredUser:
        try:
            user = User(name=name, email=email, password=digest.encode())
            user = await user.insert()
        except DuplicateKeyError as e:
            # 사전 조회 이후 다른 요청이 먼저 저장한 경우. unique 인덱스가 최종 판단 기준입니다.
            raise DuplicateEmailError(email) from e
        except _STORE_ERRORS as e:
            raise PersistenceError("create") from e
        return _to_stored(user)
