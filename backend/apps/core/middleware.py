import logging

from django.conf import settings
from django.db import InterfaceError, OperationalError
from django.http import JsonResponse

from apps.core.api.exceptions import StoreUnavailable
from apps.core.sites import SiteNotFound, resolve_site

logger = logging.getLogger(__name__)


def error_response(code: str, detail, status: int) -> JsonResponse:
    return JsonResponse({"code": code, "detail": str(detail), "field_errors": {}}, status=status)


class CurrentSiteMiddleware:
    """Bind the Site matching the request host to ``request.site``."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.site = None
        base_host = getattr(settings, "QADAY_BASE_HOST", "")
        if base_host:
            host = request.get_host()
            try:
                request.site = resolve_site(host, base_host)
            except SiteNotFound as exc:
                logger.warning("Site resolution failed: %s", exc)
                return error_response("site_not_found", exc, 404)
            except (OperationalError, InterfaceError):
                logger.exception("Data store failure while resolving site for host %s", host)
                return error_response(
                    StoreUnavailable.default_code,
                    StoreUnavailable.default_detail,
                    StoreUnavailable.status_code,
                )
        return self.get_response(request)
