from __future__ import annotations

from profiles.adapters.django_profile_repo import DjangoProfileRepository
from user.adapters.django_user_repo import DjangoUserRepository
from user.application.usecases.register_user import RegisterUserUseCase


def build_register_user_usecase() -> RegisterUserUseCase:
    return RegisterUserUseCase(
        user_repo=DjangoUserRepository(),
        profile_repo=DjangoProfileRepository(),
    )
