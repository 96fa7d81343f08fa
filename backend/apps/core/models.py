import re
import uuid

from django.core.validators import RegexValidator
from django.db import models

SUBDOMAIN_RE = re.compile(r"^[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?$", re.IGNORECASE)

validate_subdomain_label = RegexValidator(
    SUBDOMAIN_RE,
    "Subdomain must be a single DNS label (a-z, 0-9, '-').",
    code="invalid_subdomain",
)


def normalize_subdomain(value: str | None) -> str:
    return (value or "").strip().lower()


class SiteQuerySet(models.QuerySet):
    def for_subdomain(self, subdomain: str):
        return self.filter(subdomain=normalize_subdomain(subdomain)).first()


class Site(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    subdomain = models.CharField(max_length=63, unique=True, validators=[validate_subdomain_label])
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = SiteQuerySet.as_manager()

    class Meta:
        db_table = "core_site"
        ordering = ["name"]

    def clean_fields(self, exclude=None):
        # Uniqueness is checked after this, so it sees the stored form.
        self.subdomain = normalize_subdomain(self.subdomain)
        super().clean_fields(exclude=exclude)

    def save(self, *args, **kwargs):
        self.subdomain = normalize_subdomain(self.subdomain)
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.name} ({self.subdomain})"
