# 요청/응답 스키마 정의 (Pydantic 모델)

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

class RegisterRequest(BaseModel):
    # 누락된 필드도 422가 아니라 서비스의 400 응답으로 처리하기 위해 모두 Optional
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

class StoredUser(BaseModel):
    """저장소가 돌려주는 사용자 레코드 (id는 저장소가 부여)"""
    id: str
    name: str
    email: str
    password: str = Field(repr=False)
    created_at: datetime

class UserPublic(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    email: str
    created_at: datetime = Field(alias="createdAt")

    @classmethod
    def from_stored(cls, user: StoredUser) -> "UserPublic":
        return cls(id=user.id, name=user.name, email=user.email, created_at=user.created_at)

class RegisterResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    saved_user: UserPublic = Field(alias="savedUser")

class MessageResponse(BaseModel):
    message: str
