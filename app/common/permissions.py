from rest_framework.permissions import BasePermission


class IsRecruiter(BasePermission):
    """
    인증된 사용자의 user_type이 Recruiter인지 확인합니다.
    """

    message = "Only recruiters can perform this action"

    def has_permission(self, request, view):
        user = request.user
        return bool(
            user and user.is_authenticated and getattr(user, "is_recruiter", False)
        )


class IsJobSeeker(BasePermission):
    """
    인증된 사용자의 user_type이 Job Seeker인지 확인합니다.
    """

    message = "Only job seekers can perform this action"

    def has_permission(self, request, view):
        user = request.user
        return bool(
            user and user.is_authenticated and getattr(user, "is_job_seeker", False)
        )
