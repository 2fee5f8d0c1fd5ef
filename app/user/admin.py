from django.contrib import admin
from django.contrib.auth import get_user_model
from user.models import UsersType


class UserAdmin(admin.ModelAdmin):
    list_display = ("id", "email", "first_name", "last_name", "user_type", "date_joined")
    list_filter = ("user_type", "is_active", "date_joined")
    search_fields = ("email", "first_name", "last_name")
    ordering = ("-date_joined",)


admin.site.register(get_user_model(), UserAdmin)


@admin.register(UsersType)
class UsersTypeAdmin(admin.ModelAdmin):
    list_display = ("id", "user_type_name")
