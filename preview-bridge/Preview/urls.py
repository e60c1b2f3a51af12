from typing import Mapping, Optional, Sequence, Union
from urllib.parse import urljoin, urlsplit

HeaderValue = Union[str, Sequence[str], None]


def to_single(value: HeaderValue) -> str:
    if not value:
        return ""
    if isinstance(value, str):
        return value
    return value[0] or ""


def _first_header(headers: Mapping[str, HeaderValue], name: str) -> str:
    # Repeated headers reach us comma-joined ("https, http")
    return to_single(headers.get(name)).split(",")[0].strip()


def to_origin(headers: Optional[Mapping[str, HeaderValue]], fallback_origin: str) -> str:
    """Public scheme+host of the request, as seen through the proxy."""
    headers = headers or {}
    host = _first_header(headers, "host")
    if not host:
        return fallback_origin
    protocol = _first_header(headers, "x-forwarded-proto") or "https"
    return f"{protocol}://{host}"


def to_absolute_url(url: Optional[str], origin: str) -> str:
    """Resolve ``url`` against ``origin``; empty string if that is not possible."""
    if not url or not url.strip():
        return ""
    try:
        resolved = urljoin(origin + "/", url.strip())
        parts = urlsplit(resolved)
    except ValueError:
        return ""
    if not parts.scheme or not parts.netloc:
        return ""
    return resolved
