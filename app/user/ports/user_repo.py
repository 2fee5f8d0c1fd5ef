from __future__ import annotations

from typing import Optional, Protocol

from common.application.result import Result
from user.models import User, UsersType


class UserRepositoryPort(Protocol):
    def get_by_id(self, user_id: int) -> Optional[User]: ...

    def email_exists(self, email: str) -> bool: ...

    def get_user_type(self, user_type_id: int) -> Optional[UsersType]: ...

    def list_user_types(self) -> list[UsersType]: ...

    def create_user(
        self,
        *,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
        user_type: UsersType,
    ) -> Result[User]: ...
