from django.apps import AppConfig


class SavedJobConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "saved_job"
