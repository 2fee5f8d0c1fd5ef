from django.contrib import admin
from saved_job.models import JobSeekerSave


@admin.register(JobSeekerSave)
class JobSeekerSaveAdmin(admin.ModelAdmin):
    list_display = ["id", "job_seeker", "job", "saved_at"]
    search_fields = ["job__job_title", "job_seeker__user__email"]
    ordering = ["-saved_at"]
