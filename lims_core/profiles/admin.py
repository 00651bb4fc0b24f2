from django.contrib import admin

from lims_core.profiles.models import Profile


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ("name", "id", "organisation", "created_at")
    list_filter = ("organisation",)
    search_fields = ("name",)
    readonly_fields = ("id", "created_at", "updated_at")
    ordering = ("-created_at",)
