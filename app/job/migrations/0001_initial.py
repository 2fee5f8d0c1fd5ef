from __future__ import annotations

import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="JobCompany",
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
                ("name", models.CharField(max_length=200, unique=True)),
                ("logo", models.CharField(blank=True, max_length=255)),
                ("website", models.CharField(blank=True, max_length=255)),
            ],
            options={
                "db_table": "job_company",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="JobLocation",
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
                ("city", models.CharField(max_length=100)),
                ("state", models.CharField(blank=True, max_length=100)),
                ("country", models.CharField(max_length=100)),
            ],
            options={
                "db_table": "job_location",
                "ordering": ["country", "state", "city"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("city", "state", "country"),
                        name="uniq_job_location_city_state_country",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="JobPostActivity",
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
                ("job_title", models.CharField(max_length=200)),
                ("description_of_job", models.TextField(max_length=5000)),
                (
                    "job_type",
                    models.CharField(
                        choices=[
                            ("Full-Time", "Full-Time"),
                            ("Part-Time", "Part-Time"),
                            ("Contract", "Contract"),
                            ("Freelance", "Freelance"),
                            ("InternShip", "InternShip"),
                        ],
                        max_length=50,
                    ),
                ),
                ("salary", models.CharField(max_length=100)),
                (
                    "remote",
                    models.CharField(
                        choices=[
                            ("Office-Only", "Office-Only"),
                            ("Remote-Only", "Remote-Only"),
                            ("Partial-Remote", "Partial-Remote"),
                        ],
                        max_length=50,
                    ),
                ),
                (
                    "posted_date",
                    models.DateTimeField(default=django.utils.timezone.now),
                ),
                (
                    "job_company",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="jobs",
                        to="job.jobcompany",
                    ),
                ),
                (
                    "job_location",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="jobs",
                        to="job.joblocation",
                    ),
                ),
                (
                    "posted_by",
                    models.ForeignKey(
                        help_text="공고를 등록한 Recruiter",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="job_posts",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "job_post_activity",
                "ordering": ["-posted_date", "-id"],
                "indexes": [
                    models.Index(fields=["posted_date"], name="job_posted_date_idx"),
                    models.Index(
                        fields=["job_type", "remote"], name="job_type_remote_idx"
                    ),
                ],
            },
        ),
    ]
