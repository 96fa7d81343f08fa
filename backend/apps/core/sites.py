"""Resolve the tenant Site of a request from its host name.

A request arriving on ``<subdomain>.<base host>`` belongs to the Site whose
``subdomain`` matches. Hosts that do not mention the base host at all are
left alone: they get no Site and no error.
"""

from apps.core.models import Site


class SiteNotFound(Exception):
    def __init__(self, host: str, subdomain: str, message: str | None = None):
        self.host = host
        self.subdomain = subdomain
        super().__init__(message or f'Cannot find site for host "{host}", subdomain "{subdomain}"')


class InvalidHost(SiteNotFound):
    """The host mentions the base host but is not ``<label>.<base host>``."""

    def __init__(self, host: str, base_host: str, subdomain: str = ""):
        self.base_host = base_host
        super().__init__(host, subdomain, f'Host "{host}" is not a subdomain of "{base_host}"')


def normalize_host(host: str) -> str:
    host = (host or "").strip().lower()
    if host.startswith("["):
        # IPv6 literal, keep the brackets and drop the port.
        return host.split("]", 1)[0] + "]"
    if ":" in host:
        host = host.rsplit(":", 1)[0]
    return host.rstrip(".")


def extract_subdomain(host: str, base_host: str) -> str | None:
    """Return the subdomain of ``host`` under ``base_host``.

    ``None`` means the host is unrelated to the base host. Only a suffix
    anchored at the end of the host is stripped; any other host containing
    the base host raises ``InvalidHost``.
    """
    host = normalize_host(host)
    base_host = normalize_host(base_host)
    if not base_host or base_host not in host:
        return None

    suffix = f".{base_host}"
    if not host.endswith(suffix):
        raise InvalidHost(host, base_host)

    subdomain = host[: -len(suffix)]
    if not subdomain or subdomain.startswith(".") or subdomain.endswith("."):
        raise InvalidHost(host, base_host, subdomain)
    return subdomain


def resolve_site(host: str, base_host: str) -> Site | None:
    subdomain = extract_subdomain(host, base_host)
    if subdomain is None:
        return None

    site = Site.objects.for_subdomain(subdomain)
    if site is None:
        raise SiteNotFound(normalize_host(host), subdomain)
    return site


def get_current_site(request) -> Site | None:
    return getattr(request, "site", None)
