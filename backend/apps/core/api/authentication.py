from django.conf import settings
from django.contrib.auth.models import AnonymousUser
from rest_framework import authentication, exceptions

API_KEY_HEADER = "X-API-Key"


class ApiKeyAuthentication(authentication.BaseAuthentication):
    """Authenticate service clients by a shared key listed in ``QADAY_API_KEYS``.

    The key becomes ``request.auth``; there is no user behind it.
    """

    def authenticate(self, request):
        api_key = request.headers.get(API_KEY_HEADER, "").strip()
        if not api_key:
            return None

        if api_key not in getattr(settings, "QADAY_API_KEYS", []):
            raise exceptions.AuthenticationFailed(f"Unknown {API_KEY_HEADER} value.")

        return (AnonymousUser(), api_key)

    def authenticate_header(self, request):
        return API_KEY_HEADER
