# User 도메인 모델 (Beanie Document)
# - 이름, 이메일, 비밀번호 해시, 생성일
# - 이메일은 unique 인덱스 (동시 가입 시 중복 방지의 최종 보루)

from datetime import datetime, timezone

from beanie import Document, Indexed
from pydantic import Field

class User(Document):
    name: str
    email: Indexed(str, unique=True)  # 중복 방지 인덱스
    password: str = Field(repr=False)  # bcrypt 해시만 저장
    created_at: datetime = Field(default_factory=lambda: datetime.now(tz=timezone.utc))

    class Settings:
        name = "users"  # 컬렉션명
