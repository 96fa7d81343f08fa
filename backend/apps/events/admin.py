from django.contrib import admin

from apps.events.models import Event
from apps.events.services import save_event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ("name", "site", "start_date", "end_date")
    list_filter = ("site",)
    search_fields = ("name",)
    date_hierarchy = "start_date"

    def save_model(self, request, obj, form, change):
        save_event(obj)
