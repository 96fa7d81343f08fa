from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from apps.core.models import Site


class LoadSitesCommandTests(TestCase):
    def test_replaces_sites_with_demo_sites(self):
        Site.objects.create(subdomain="stale", name="Stale")
        out = StringIO()

        call_command("load_sites", stdout=out)

        self.assertEqual(
            sorted(Site.objects.values_list("subdomain", flat=True)),
            ["alpacas", "kittens"],
        )
        self.assertEqual(Site.objects.get(subdomain="kittens").name, "Cute Kittens")
        self.assertIn("Loaded 2 sites", out.getvalue())

    def test_can_run_twice(self):
        call_command("load_sites", stdout=StringIO())
        call_command("load_sites", stdout=StringIO())

        self.assertEqual(Site.objects.count(), 2)
