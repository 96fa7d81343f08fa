from django.core.management.base import BaseCommand
from django.db import transaction

from apps.core.models import Site
from apps.events.models import Event

DEMO_SITES = [
    {"subdomain": "kittens", "name": "Cute Kittens", "description": "I'm peerrrrfect!"},
    {"subdomain": "alpacas", "name": "Funny Alpacas", "description": "Alpaca my bags!"},
]


class Command(BaseCommand):
    help = "Replace every site with the demo sites."

    @transaction.atomic
    def handle(self, *args, **options):
        Event.objects.filter(site__isnull=False).delete()
        Site.objects.all().delete()
        sites = [Site.objects.create(**item) for item in DEMO_SITES]
        self.stdout.write(
            self.style.SUCCESS(f"Loaded {len(sites)} sites: {', '.join(site.subdomain for site in sites)}")
        )
