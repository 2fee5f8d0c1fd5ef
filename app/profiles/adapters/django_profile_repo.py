from __future__ import annotations

from typing import Optional

from profiles.models import JobSeekerProfile, RecruiterProfile
from profiles.ports.profile_repo import Profile, ProfileRepositoryPort
from user.models import User


class DjangoProfileRepository(ProfileRepositoryPort):
    def get_job_seeker_profile(self, user_id: int) -> Optional[JobSeekerProfile]:
        try:
            return JobSeekerProfile.objects.select_related("user").get(user_id=user_id)
        except JobSeekerProfile.DoesNotExist:
            return None

    def get_recruiter_profile(self, user_id: int) -> Optional[RecruiterProfile]:
        try:
            return RecruiterProfile.objects.select_related("user").get(user_id=user_id)
        except RecruiterProfile.DoesNotExist:
            return None

    def create_for_user(self, user: User) -> Optional[Profile]:
        """
        사용자 유형에 맞는 빈 프로필을 생성합니다.

        user_type 이 없으면(관리자 등) 생성하지 않습니다.
        """
        if user.is_recruiter:
            profile, _ = RecruiterProfile.objects.get_or_create(
                user=user,
                defaults={"first_name": user.first_name, "last_name": user.last_name},
            )
            return profile
        if user.is_job_seeker:
            profile, _ = JobSeekerProfile.objects.get_or_create(
                user=user,
                defaults={"first_name": user.first_name, "last_name": user.last_name},
            )
            return profile
        return None

    def save(self, profile: Profile) -> Profile:
        profile.save()
        profile.refresh_from_db()
        return profile
