from django.urls import path
from saved_job.views import SavedJobCountView, SavedJobListView

urlpatterns = [
    path("", SavedJobListView.as_view(), name="saved_jobs"),
    path("count/", SavedJobCountView.as_view(), name="saved_jobs_count"),
]
