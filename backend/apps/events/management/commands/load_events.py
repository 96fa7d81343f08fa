from datetime import datetime

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from django.utils import timezone

from apps.core.models import Site
from apps.events.models import Event
from apps.events.services import create_event

DEMO_EVENT = {
    "name": "KnpU QA Day",
    "start_date": datetime(2013, 3, 27, 12, 0),
    "end_date": datetime(2013, 3, 27, 17, 0),
}


class Command(BaseCommand):
    help = "Replace every event with the demo event."

    def add_arguments(self, parser):
        parser.add_argument("--site", help="Subdomain of the site the demo event belongs to.")

    @transaction.atomic
    def handle(self, *args, **options):
        site = None
        if options.get("site"):
            site = Site.objects.for_subdomain(options["site"])
            if site is None:
                raise CommandError(f'Unknown site "{options["site"]}".')

        Event.objects.all().delete()
        event = create_event(
            name=DEMO_EVENT["name"],
            start_date=timezone.make_aware(DEMO_EVENT["start_date"]),
            end_date=timezone.make_aware(DEMO_EVENT["end_date"]),
            site=site,
        )
        self.stdout.write(self.style.SUCCESS(f"Loaded event {event.name} ({event.start_date} - {event.end_date})"))
