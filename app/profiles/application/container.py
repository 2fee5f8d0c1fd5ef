from __future__ import annotations

from profiles.adapters.django_profile_repo import DjangoProfileRepository


def build_profile_repo() -> DjangoProfileRepository:
    return DjangoProfileRepository()
