from django.contrib import admin
from job.models import JobCompany, JobLocation, JobPostActivity


@admin.register(JobPostActivity)
class JobPostActivityAdmin(admin.ModelAdmin):
    list_display = [
        "id",
        "job_title",
        "job_company",
        "job_type",
        "remote",
        "posted_by",
        "posted_date",
    ]
    search_fields = ["job_title", "job_company__name", "posted_by__email"]
    list_filter = ["job_type", "remote", "posted_date"]
    ordering = ["-posted_date"]
    list_select_related = ["job_company", "posted_by"]
    list_per_page = 100


@admin.register(JobCompany)
class JobCompanyAdmin(admin.ModelAdmin):
    list_display = ["id", "name", "website"]
    search_fields = ["name"]


@admin.register(JobLocation)
class JobLocationAdmin(admin.ModelAdmin):
    list_display = ["id", "city", "state", "country"]
    search_fields = ["city", "state", "country"]
    list_filter = ["country"]
