from django.urls import path
from job.views import (
    JobCompanyListCreateView,
    JobCompanySearchView,
    JobLocationListCreateView,
    JobLocationSearchView,
)

urlpatterns = [
    path("locations/", JobLocationListCreateView.as_view(), name="locations"),
    path("locations/search/", JobLocationSearchView.as_view(), name="locations_search"),
    path("companies/", JobCompanyListCreateView.as_view(), name="companies"),
    path("companies/search/", JobCompanySearchView.as_view(), name="companies_search"),
]
