from django.contrib import admin

from lims_core.results.models import Result


@admin.register(Result)
class ResultAdmin(admin.ModelAdmin):
    list_display = ("sample_id", "result_type_display", "result_display", "profile", "activated_at", "result_at")
    list_filter = ("result_type",)
    search_fields = ("sample_id", "profile__name")
    readonly_fields = ("id", "activated_at")
    ordering = ("-activated_at",)
