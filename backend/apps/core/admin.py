from django.contrib import admin

from apps.core.models import Site


@admin.register(Site)
class SiteAdmin(admin.ModelAdmin):
    list_display = ("name", "subdomain", "created_at")
    search_fields = ("name", "subdomain", "description")
    ordering = ("name",)
