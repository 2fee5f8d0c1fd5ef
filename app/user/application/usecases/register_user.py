from __future__ import annotations

from common.application.result import Err, Ok, Result
from profiles.ports.profile_repo import ProfileRepositoryPort
from user.models import User
from user.ports.user_repo import UserRepositoryPort


class RegisterUserUseCase:
    """
    회원 가입 유스케이스

    - 이메일 중복 확인 (EMAIL_EXISTS)
    - 사용자 유형 확인 (INVALID_USER_TYPE)
    - 사용자 생성 후 유형에 맞는 빈 프로필 생성
    """

    def __init__(
        self,
        *,
        user_repo: UserRepositoryPort,
        profile_repo: ProfileRepositoryPort,
    ):
        self._user_repo = user_repo
        self._profile_repo = profile_repo

    def execute(
        self,
        *,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
        user_type_id: int,
    ) -> Result[User]:
        email = email.strip().lower()
        if self._user_repo.email_exists(email):
            return Err(
                code="EMAIL_EXISTS",
                message="Email already registered",
                details={"email": email},
            )

        user_type = self._user_repo.get_user_type(user_type_id)
        if user_type is None:
            return Err(
                code="INVALID_USER_TYPE",
                message="Invalid user type",
                details={"user_type_id": user_type_id},
            )

        result = self._user_repo.create_user(
            email=email,
            password=password,
            first_name=first_name.strip(),
            last_name=last_name.strip(),
            user_type=user_type,
        )
        if isinstance(result, Err):
            return result

        assert isinstance(result, Ok)
        self._profile_repo.create_for_user(result.value)
        return result
