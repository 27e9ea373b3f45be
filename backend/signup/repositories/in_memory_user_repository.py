# 인메모리 사용자 저장소
# - MongoDB 없이 테스트/로컬 실행할 때 사용 (USER_REPOSITORY=inmemory)

import uuid
from datetime import datetime, timezone
from typing import Dict, Optional

from ..core.exceptions import DuplicateEmailError
from ..core.security import PasswordDigest
from ..schemas.user_schema import StoredUser


class InMemoryUserRepository:
    """이메일을 키로 하는 dict 저장소.

    create는 조회와 저장 사이에 await가 없으므로 단일 이벤트 루프에서
    MongoDB unique 인덱스와 같은 방식으로 이메일 중복을 막습니다.
    """

    def __init__(self) -> None:
        self._users: Dict[str, StoredUser] = {}

    async def get_by_email(self, email: str) -> Optional[StoredUser]:
        return self._users.get(email)

    async def create(self, name: str, email: str, digest: PasswordDigest) -> StoredUser:
        if email in self._users:
            raise DuplicateEmailError(email)
        user = StoredUser(
            id=uuid.uuid4().hex,
            name=name,
            email=email,
            password=digest.encode(),
            created_at=datetime.now(tz=timezone.utc),
        )
        self._users[email] = user
        return user

    def count(self) -> int:
        return len(self._users)

    def clear(self) -> None:
        self._users.clear()
