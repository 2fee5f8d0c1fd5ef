from __future__ import annotations

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("job", "0001_initial"),
        ("profiles", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="JobSeekerApply",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "apply_date",
                    models.DateTimeField(default=django.utils.timezone.now),
                ),
                ("cover_letter", models.TextField(blank=True)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("APPLIED", "Applied"),
                            ("UNDER_REVIEW", "Under Review"),
                            ("INTERVIEW_SCHEDULED", "Interview Scheduled"),
                            ("INTERVIEWED", "Interviewed"),
                            ("OFFERED", "Offered"),
                            ("HIRED", "Hired"),
                            ("REJECTED", "Rejected"),
                            ("WITHDRAWN", "Withdrawn"),
                        ],
                        default="APPLIED",
                        max_length=30,
                    ),
                ),
                ("resume_path", models.CharField(blank=True, max_length=255)),
                ("last_updated", models.DateTimeField(auto_now=True)),
                ("recruiter_notes", models.TextField(blank=True)),
                (
                    "job",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="applications",
                        to="job.jobpostactivity",
                    ),
                ),
                (
                    "job_seeker",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="applications",
                        to="profiles.jobseekerprofile",
                    ),
                ),
            ],
            options={
                "db_table": "job_seeker_apply",
                "ordering": ["-apply_date", "-id"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("job_seeker", "job"),
                        name="uniq_apply_job_seeker_job",
                    )
                ],
                "indexes": [
                    models.Index(fields=["status"], name="apply_status_idx"),
                    models.Index(fields=["apply_date"], name="apply_date_idx"),
                ],
            },
        ),
    ]
