# 보안 유틸리티
# - 비밀번호 해싱/검증 (bcrypt, passlib CryptContext)
# - 저장된 해시 문자열을 다루는 PasswordDigest 값 타입

import re
from dataclasses import dataclass
from typing import Union

from passlib.context import CryptContext

from .config import settings

# bcrypt modular crypt 형식: $<ident>$<cost>$<salt 22자><checksum 31자>
_BCRYPT_HASH_RE = re.compile(
    r"^\$(?P<ident>2[abxy]?)\$(?P<cost>\d{2})\$"
    r"(?P<salt>[./A-Za-z0-9]{22})(?P<checksum>[./A-Za-z0-9]{31})$"
)


@dataclass(frozen=True)
class PasswordDigest:
    """bcrypt 해시를 구성 요소별로 담는 값 타입.

    salt와 cost가 해시 안에 함께 인코딩되므로 검증 시 별도로 저장할 필요가 없습니다.
    DB에는 encode() 결과 문자열이 저장됩니다.
    """
    ident: str
    cost: int
    salt: str
    checksum: str

    @classmethod
    def parse(cls, encoded: str) -> "PasswordDigest":
        match = _BCRYPT_HASH_RE.match(encoded or "")
        if match is None:
            raise ValueError("not a bcrypt password hash")
        return cls(
            ident=match.group("ident"),
            cost=int(match.group("cost")),
            salt=match.group("salt"),
            checksum=match.group("checksum"),
        )

    def encode(self) -> str:
        return f"${self.ident}${self.cost:02d}${self.salt}{self.checksum}"

    def __str__(self) -> str:
        return self.encode()

    def __repr__(self) -> str:
        # checksum은 로그에 남기지 않음
        return f"PasswordDigest(ident={self.ident!r}, cost={self.cost})"


class PasswordHasher:
    """비밀번호 해싱/검증기.

    rounds는 bcrypt cost factor(log2 반복 횟수)입니다. 값이 1 커질 때마다
    해싱 시간이 약 2배가 됩니다. 상태는 CryptContext 설정뿐이며 스레드/코루틴 간 공유해도 안전합니다.
    """

    def __init__(self, rounds: int = None):
        self.rounds = rounds if rounds is not None else settings.BCRYPT_ROUNDS
        self.context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=self.rounds,
        )

    def hash(self, password: str) -> PasswordDigest:
        # 호출마다 새로운 salt가 생성되므로 같은 입력이라도 결과가 다릅니다.
        # 72바이트를 넘는 입력은 bcrypt 규칙대로 잘려서 해싱됩니다.
        return PasswordDigest.parse(self.context.hash(password))

    def verify(self, password: str, digest: Union[PasswordDigest, str]) -> bool:
        """digest에 포함된 salt로 password를 해싱해 비교합니다.

        checksum 비교는 passlib 내부에서 상수 시간으로 수행됩니다.
        digest가 bcrypt 형식이 아니면 ValueError가 발생합니다.
        """
        if not isinstance(digest, PasswordDigest):
            digest = PasswordDigest.parse(digest)
        return self.context.verify(password, digest.encode())

    def needs_rehash(self, digest: Union[PasswordDigest, str]) -> bool:
        # cost factor를 올린 뒤 기존 해시를 점진적으로 교체할 때 사용
        if not isinstance(digest, PasswordDigest):
            digest = PasswordDigest.parse(digest)
        return digest.cost != self.rounds or self.context.needs_update(digest.encode())


password_hasher = PasswordHasher()

def get_password_hash(password: str) -> str:
    return password_hasher.hash(password).encode()

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return password_hasher.verify(plain_password, hashed_password)
