import uuid

from django.db import models

from apps.core.models import Site
from apps.events.validators import run_event_validators


class EventQuerySet(models.QuerySet):
    def for_site(self, site: Site | None):
        if site is None:
            return self.filter(site__isnull=True)
        return self.filter(site=site)

    def overlapping(self, start, end, exclude_id=None):
        queryset = self.filter(start_date__lte=end, end_date__gte=start)
        if exclude_id is not None:
            queryset = queryset.exclude(pk=exclude_id)
        return queryset


class Event(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    site = models.ForeignKey(Site, on_delete=models.PROTECT, related_name="events", blank=True, null=True)
    name = models.CharField(max_length=255)
    start_date = models.DateTimeField()
    end_date = models.DateTimeField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = EventQuerySet.as_manager()

    class Meta:
        db_table = "events_event"
        ordering = ["start_date", "name"]
        indexes = [
            models.Index(fields=["site", "start_date"], name="idx_events_site_start"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(start_date__lte=models.F("end_date")),
                name="ck_events_event_start_before_end",
            )
        ]

    def clean(self):
        super().clean()
        run_event_validators(self)

    @property
    def is_persisted(self) -> bool:
        return not self._state.adding

    def __str__(self) -> str:
        return f"{self.name} ({self.start_date:%Y-%m-%d %H:%M} - {self.end_date:%Y-%m-%d %H:%M})"
