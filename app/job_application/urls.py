from django.urls import path
from job_application.views import (
    ApplicationDetailView,
    ApplicationStatusChoicesView,
    ApplicationStatusForJobView,
    ApplyForJobView,
    JobApplicationsView,
    MyApplicationsView,
    RecruiterApplicationsView,
    RecruiterRecentApplicationsView,
    RecruiterStatisticsView,
    UpdateApplicationStatusView,
    WithdrawApplicationView,
)

urlpatterns = [
    path("job/<int:job_id>/apply/", ApplyForJobView.as_view(), name="apply_for_job"),
    path(
        "job/<int:job_id>/status/",
        ApplicationStatusForJobView.as_view(),
        name="application_status_for_job",
    ),
    path(
        "job/<int:job_id>/applications/",
        JobApplicationsView.as_view(),
        name="job_applications",
    ),
    path("my-applications/", MyApplicationsView.as_view(), name="my_applications"),
    path(
        "recruiter/applications/",
        RecruiterApplicationsView.as_view(),
        name="recruiter_applications",
    ),
    path(
        "recruiter/statistics/",
        RecruiterStatisticsView.as_view(),
        name="recruiter_statistics",
    ),
    path(
        "recruiter/recent/",
        RecruiterRecentApplicationsView.as_view(),
        name="recruiter_recent_applications",
    ),
    path("statuses/", ApplicationStatusChoicesView.as_view(), name="application_statuses"),
    path("<int:pk>/", ApplicationDetailView.as_view(), name="application_detail"),
    path(
        "<int:pk>/withdraw/", WithdrawApplicationView.as_view(), name="withdraw_application"
    ),
    path(
        "<int:pk>/status/",
        UpdateApplicationStatusView.as_view(),
        name="update_application_status",
    ),
]
