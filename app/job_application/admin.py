from django.contrib import admin
from job_application.models import JobSeekerApply


@admin.register(JobSeekerApply)
class JobSeekerApplyAdmin(admin.ModelAdmin):
    list_display = ["id", "job_seeker", "job", "status", "apply_date", "last_updated"]
    search_fields = ["job__job_title", "job_seeker__user__email"]
    list_filter = ["status", "apply_date"]
    ordering = ["-apply_date"]
    list_select_related = ["job", "job_seeker"]
