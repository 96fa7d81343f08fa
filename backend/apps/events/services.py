import logging

from django.db import transaction

from apps.core.models import Site
from apps.events.models import Event
from apps.events.validators import run_event_validators

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("name", "start_date", "end_date")


def lock_site(site: Site | None):
    """Serialise event writes of one site until the current transaction ends."""
    if site is None:
        return
    Site.objects.select_for_update().filter(pk=site.pk).first()


@transaction.atomic
def save_event(event: Event) -> Event:
    """Validate and save an event built elsewhere, e.g. by an admin form."""
    lock_site(event.site)
    created = event._state.adding
    run_event_validators(event)
    event.save()
    logger.info(
        "%s event %s %r for site %s",
        "Created" if created else "Saved",
        event.pk,
        event.name,
        event.site.subdomain if event.site else "-",
    )
    return event


def create_event(name: str, start_date, end_date, site: Site | None = None) -> Event:
    return save_event(Event(name=name, start_date=start_date, end_date=end_date, site=site))


@transaction.atomic
def update_event(event: Event, **changes) -> Event:
    unknown = set(changes) - set(EDITABLE_FIELDS)
    if unknown:
        raise TypeError(f"Cannot update event field(s): {', '.join(sorted(unknown))}")

    lock_site(event.site)
    for field, value in changes.items():
        setattr(event, field, value)
    run_event_validators(event)
    event.save(update_fields=[*changes, "updated_at"])
    logger.info("Updated event %s (%s)", event.pk, ", ".join(sorted(changes)) or "no changes")
    return event
