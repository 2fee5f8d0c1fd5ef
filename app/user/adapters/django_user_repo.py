from __future__ import annotations

from typing import Optional

from common.application.result import Err, Ok, Result
from django.db import IntegrityError, transaction
from user.models import User, UsersType
from user.ports.user_repo import UserRepositoryPort


class DjangoUserRepository(UserRepositoryPort):
    def get_by_id(self, user_id: int) -> Optional[User]:
        try:
            return User.objects.select_related("user_type").get(pk=user_id)
        except User.DoesNotExist:
            return None

    def email_exists(self, email: str) -> bool:
        return User.objects.filter(email__iexact=email).exists()

    def get_user_type(self, user_type_id: int) -> Optional[UsersType]:
        try:
            return UsersType.objects.get(pk=user_type_id)
        except UsersType.DoesNotExist:
            return None

    def list_user_types(self) -> list[UsersType]:
        return list(UsersType.objects.order_by("id"))

    def create_user(
        self,
        *,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
        user_type: UsersType,
    ) -> Result[User]:
        """
        사용자 생성 (비밀번호는 해시 저장)

        username 은 email 과 동일하게 채웁니다.
        동시 가입으로 unique 제약이 깨지면 EMAIL_EXISTS 를 반환합니다.
        """
        try:
            with transaction.atomic():
                user = User.objects.create_user(
                    username=email,
                    email=email,
                    password=password,
                    first_name=first_name,
                    last_name=last_name,
                    user_type=user_type,
                )
        except IntegrityError as e:
            return Err(
                code="EMAIL_EXISTS",
                message="Email already registered",
                details={"reason": str(e)},
            )
        return Ok(user)
