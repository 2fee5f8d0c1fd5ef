from django.urls import path
from profiles.views import (
    JobSeekerProfileUpdateView,
    ProfileFileDownloadView,
    ProfileView,
    RecruiterProfileUpdateView,
)

urlpatterns = [
    path("", ProfileView.as_view(), name="profile"),
    path("job-seeker/", JobSeekerProfileUpdateView.as_view(), name="job_seeker_profile"),
    path("recruiter/", RecruiterProfileUpdateView.as_view(), name="recruiter_profile"),
    path(
        "download/<str:file_type>/<str:file_name>/",
        ProfileFileDownloadView.as_view(),
        name="profile_file_download",
    ),
]
