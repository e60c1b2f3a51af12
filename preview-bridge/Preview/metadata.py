import logging
from dataclasses import dataclass
from typing import Optional

import requests

from .config import Settings
from .urls import to_absolute_url

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DevotionMeta:
    title: Optional[str] = None
    subtitle: Optional[str] = None
    image_url: Optional[str] = None


@dataclass(frozen=True)
class MetaFetchResult:
    ok: bool
    meta: Optional[DevotionMeta] = None
    reason: Optional[str] = None

    @classmethod
    def found(cls, meta: DevotionMeta) -> "MetaFetchResult":
        return cls(ok=True, meta=meta)

    @classmethod
    def unavailable(cls, reason: str) -> "MetaFetchResult":
        return cls(ok=False, reason=reason)


def _text(value) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value
    return None


def extract_meta(payload, origin: str) -> Optional[DevotionMeta]:
    """Pick the first ``type == "meta"`` record out of a devotion document."""
    if not isinstance(payload, list):
        return None
    record = next(
        (item for item in payload if isinstance(item, dict) and item.get("type") == "meta"),
        None,
    )
    if record is None:
        return None
    return DevotionMeta(
        title=_text(record.get("title")),
        subtitle=_text(record.get("subtitle")),
        image_url=to_absolute_url(_text(record.get("imageUrl")), origin) or None,
    )


def fetch_devotion_meta(filename: str, origin: str, settings: Settings,
                        session: Optional[requests.Session] = None) -> MetaFetchResult:
    """Fetch the devotion document for ``filename`` and extract its meta record.

    Single GET, no retry. Every failure comes back as an ``unavailable``
    result so the caller can fall back to defaults.
    """
    url = settings.data_url(filename)
    http = session or requests

    try:
        response = http.get(url, timeout=settings.fetch_timeout, headers={"Accept": "application/json"})
    except requests.RequestException as e:
        return _unavailable(url, f"request failed: {e}")

    if not response.ok:
        return _unavailable(url, f"upstream returned HTTP {response.status_code}")

    try:
        payload = response.json()
    except ValueError as e:
        return _unavailable(url, f"invalid JSON: {e}")

    if not isinstance(payload, list):
        return _unavailable(url, f"expected a JSON array, got {type(payload).__name__}")

    meta = extract_meta(payload, origin)
    if meta is None:
        return _unavailable(url, "no meta record")
    return MetaFetchResult.found(meta)


def _unavailable(url: str, reason: str) -> MetaFetchResult:
    logger.warning("Devotion metadata unavailable for %s: %s", url, reason)
    return MetaFetchResult.unavailable(reason)
