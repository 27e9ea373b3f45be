# 커스텀 예외 클래스 정의
# - 클라이언트 입력 오류(4xx)와 인프라 오류(5xx)를 구분합니다.
# - message는 그대로 응답 본문에 실리므로 내부 정보를 담지 않습니다.

class RegistrationError(Exception):
    """회원가입 관련 기본 예외 클래스

    Attributes:
        message: 사용자에게 돌려줄 메시지
        status_code: 매핑될 HTTP 상태 코드
    """
    status_code = 400
    message = "Registration failed."

    def __init__(self, message: str = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class RegistrationValidationError(RegistrationError):
    """필수 입력값(name, email, password)이 없거나 비어 있을 때"""
    message = "All fields are required."


class DuplicateEmailError(RegistrationError):
    """이미 등록된 이메일로 가입을 시도할 때

    사전 조회에서 발견된 경우와, 동시 가입 경쟁에서 저장소의
    unique 인덱스 위반으로 드러난 경우 모두 이 예외로 표현합니다.

    Attributes:
        email: 중복된 이메일
    """
    message = "Email is already registered."

    def __init__(self, email: str = None):
        self.email = email
        super().__init__()


class PersistenceError(RegistrationError):
    """저장소 조회/저장이 인프라 문제로 실패했을 때

    원인 예외는 __cause__로 연결되어 로그에만 남고 응답에는 노출되지 않습니다.

    Attributes:
        operation: 실패한 저장소 작업 이름 (예: "get_by_email")
    """
    status_code = 500
    message = "Server error"

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__()
