from __future__ import annotations

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="JobSeekerProfile",
            fields=[
                (
                    "user",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        primary_key=True,
                        related_name="job_seeker_profile",
                        serialize=False,
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                ("first_name", models.CharField(blank=True, max_length=150)),
                ("last_name", models.CharField(blank=True, max_length=150)),
                ("phone", models.CharField(blank=True, max_length=30)),
                ("date_of_birth", models.DateField(blank=True, null=True)),
                ("gender", models.CharField(blank=True, max_length=30)),
                ("city", models.CharField(blank=True, max_length=100)),
                ("state", models.CharField(blank=True, max_length=100)),
                ("country", models.CharField(blank=True, max_length=100)),
                ("willing_to_relocate", models.BooleanField(default=False)),
                ("current_job_title", models.CharField(blank=True, max_length=200)),
                ("experience", models.TextField(blank=True)),
                ("education", models.TextField(blank=True)),
                ("work_authorization", models.CharField(blank=True, max_length=100)),
                ("employment_type", models.CharField(blank=True, max_length=50)),
                ("expected_salary", models.CharField(blank=True, max_length=100)),
                ("availability_date", models.DateField(blank=True, null=True)),
                ("linkedin_profile", models.CharField(blank=True, max_length=255)),
                ("github_profile", models.CharField(blank=True, max_length=255)),
                ("portfolio_website", models.CharField(blank=True, max_length=255)),
                ("profile_photo", models.CharField(blank=True, max_length=255)),
                ("resume", models.CharField(blank=True, max_length=255)),
                ("resume_original_name", models.CharField(blank=True, max_length=255)),
                ("resume_upload_date", models.DateTimeField(blank=True, null=True)),
                ("resume_file_size", models.BigIntegerField(blank=True, null=True)),
                ("cover_letter", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "job_seeker_profile",
            },
        ),
        migrations.CreateModel(
            name="RecruiterProfile",
            fields=[
                (
                    "user",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        primary_key=True,
                        related_name="recruiter_profile",
                        serialize=False,
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                ("first_name", models.CharField(blank=True, max_length=150)),
                ("last_name", models.CharField(blank=True, max_length=150)),
                ("city", models.CharField(blank=True, max_length=100)),
                ("state", models.CharField(blank=True, max_length=100)),
                ("country", models.CharField(blank=True, max_length=100)),
                ("company", models.CharField(blank=True, max_length=200)),
                ("profile_photo", models.CharField(blank=True, max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "recruiter_profile",
            },
        ),
    ]
