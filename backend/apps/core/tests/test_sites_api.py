from unittest import mock

from django.db import OperationalError
from django.test import override_settings
from rest_framework import status
from rest_framework.test import APITestCase

from apps.core.models import Site


@override_settings(QADAY_BASE_HOST="example.com", QADAY_API_KEYS=["dev-api-key"])
class SiteApiTests(APITestCase):
    def setUp(self):
        self.client.credentials(HTTP_X_API_KEY="dev-api-key")

    def test_health_does_not_require_api_key(self):
        self.client.credentials()

        response = self.client.get("/api/v1/health")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()["status"], "ok")

    def test_missing_api_key_returns_401(self):
        self.client.credentials()

        response = self.client.get("/api/v1/sites/")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.json()["code"], "authentication_failed")
        self.assertEqual(response["WWW-Authenticate"], "X-API-Key")

    def test_invalid_api_key_returns_401(self):
        self.client.credentials(HTTP_X_API_KEY="nope")

        response = self.client.get("/api/v1/sites/")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_list_sites_ordered_by_name(self):
        Site.objects.create(subdomain="kittens", name="Cute Kittens")
        Site.objects.create(subdomain="alpacas", name="Alpacas")

        response = self.client.get("/api/v1/sites/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([item["subdomain"] for item in response.json()], ["alpacas", "kittens"])

    def test_create_site_normalizes_subdomain(self):
        payload = {"subdomain": " Kittens ", "name": "Cute Kittens", "description": "I'm peerrrrfect!"}

        response = self.client.post("/api/v1/sites/", payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.json()["subdomain"], "kittens")
        self.assertEqual(Site.objects.get().description, "I'm peerrrrfect!")

    def test_create_site_rejects_duplicate_subdomain(self):
        Site.objects.create(subdomain="kittens", name="Cute Kittens")

        response = self.client.post("/api/v1/sites/", {"subdomain": "KITTENS", "name": "Again"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()["code"], "validation_error")
        self.assertIn("subdomain", response.json()["field_errors"])
        self.assertEqual(Site.objects.count(), 1)

    def test_create_site_rejects_dotted_subdomain(self):
        response = self.client.post("/api/v1/sites/", {"subdomain": "a.b", "name": "Nested"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(Site.objects.exists())

    def test_current_site_for_subdomain_host(self):
        site = Site.objects.create(subdomain="kittens", name="Cute Kittens")

        response = self.client.get("/api/v1/sites/current", HTTP_HOST="kittens.example.com")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()["id"], str(site.id))
        self.assertEqual(response.json()["name"], "Cute Kittens")

    def test_current_site_on_unrelated_host_returns_404(self):
        response = self.client.get("/api/v1/sites/current", HTTP_HOST="unrelated.org")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.json()["code"], "no_current_site")

    def test_unknown_subdomain_returns_site_not_found(self):
        response = self.client.get("/api/v1/sites/", HTTP_HOST="puppies.example.com")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.json()["code"], "site_not_found")

    def test_store_failure_returns_503(self):
        with mock.patch.object(Site.objects, "all", side_effect=OperationalError("connection refused")):
            with self.assertLogs("apps.core.api.exceptions", level="ERROR"):
                response = self.client.get("/api/v1/sites/")

        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertEqual(response.json()["code"], "store_unavailable")

    def test_store_failure_during_site_resolution_returns_503(self):
        with mock.patch.object(Site.objects, "for_subdomain", side_effect=OperationalError("down")):
            with self.assertLogs("apps.core.middleware", level="ERROR"):
                response = self.client.get("/api/v1/sites/", HTTP_HOST="kittens.example.com")

        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertEqual(response.json()["code"], "store_unavailable")
