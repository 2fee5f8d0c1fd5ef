from django.urls import include, path
from job.views import JobPostActivityViewSet
from rest_framework.routers import SimpleRouter

router = SimpleRouter()
router.register(r"", JobPostActivityViewSet, basename="job")

urlpatterns = [
    path("", include(router.urls)),
]
