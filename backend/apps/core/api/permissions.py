from rest_framework.permissions import BasePermission

from apps.core.api.authentication import ApiKeyAuthentication


class HasValidApiKey(BasePermission):
    message = "A valid X-API-Key header is required."

    def has_permission(self, request, view):
        if request.method == "OPTIONS":
            return True
        return isinstance(request.successful_authenticator, ApiKeyAuthentication)
