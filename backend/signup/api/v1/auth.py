# 회원가입 라우터
# - 회원가입: POST /register
# - 오류 응답(400/500)은 main.py의 예외 핸들러가 {"message": ...} 형태로 만듭니다.

from fastapi import APIRouter, Depends, status

from ...schemas.user_schema import MessageResponse, RegisterRequest, RegisterResponse, UserPublic
from ...services.auth_service import AuthService, get_auth_service

router = APIRouter(tags=["auth"])

@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": MessageResponse}, 500: {"model": MessageResponse}},
    summary="회원가입 (이메일 중복 체크 포함)",
)
async def register(payload: RegisterRequest, service: AuthService = Depends(get_auth_service)):
    user = await service.register(payload.name, payload.email, payload.password)
    return RegisterResponse(
        message="User registered successfully!",
        saved_user=UserPublic.from_stored(user),
    )
