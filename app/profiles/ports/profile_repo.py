from __future__ import annotations

from typing import Optional, Protocol, Union

from profiles.models import JobSeekerProfile, RecruiterProfile
from user.models import User

Profile = Union[JobSeekerProfile, RecruiterProfile]


class ProfileRepositoryPort(Protocol):
    def get_job_seeker_profile(self, user_id: int) -> Optional[JobSeekerProfile]: ...

    def get_recruiter_profile(self, user_id: int) -> Optional[RecruiterProfile]: ...

    def create_for_user(self, user: User) -> Optional[Profile]: ...

    def save(self, profile: Profile) -> Profile: ...
