from __future__ import annotations

from django.db import migrations

USERS_TYPES = [(1, "Recruiter"), (2, "Job Seeker")]


def seed_users_types(apps, schema_editor):
    UsersType = apps.get_model("user", "UsersType")
    for pk, name in USERS_TYPES:
        UsersType.objects.update_or_create(pk=pk, defaults={"user_type_name": name})


def unseed_users_types(apps, schema_editor):
    UsersType = apps.get_model("user", "UsersType")
    UsersType.objects.filter(pk__in=[pk for pk, _ in USERS_TYPES]).delete()


class Migration(migrations.Migration):
    dependencies = [
        ("user", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(seed_users_types, unseed_users_types),
    ]
