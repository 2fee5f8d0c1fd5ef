from django.contrib import admin
from profiles.models import JobSeekerProfile, RecruiterProfile


@admin.register(JobSeekerProfile)
class JobSeekerProfileAdmin(admin.ModelAdmin):
    list_display = ["user", "first_name", "last_name", "current_job_title", "city"]
    search_fields = ["user__email", "first_name", "last_name"]


@admin.register(RecruiterProfile)
class RecruiterProfileAdmin(admin.ModelAdmin):
    list_display = ["user", "first_name", "last_name", "company", "city"]
    search_fields = ["user__email", "company"]
