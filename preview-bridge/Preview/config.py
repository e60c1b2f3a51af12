import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Morning Light"
DEFAULT_DESCRIPTION = "Daily devotion from Morning Light."
DEFAULT_SITE_NAME = "Morning Light"
DEFAULT_FALLBACK_ORIGIN = "https://example.com"
DEFAULT_DATA_URL_TEMPLATE = (
    "https://raw.githubusercontent.com/devasudanT/"
    "morning-light-devotions-data/main/data/{filename}"
)
DEFAULT_FETCH_TIMEOUT = 5.0


@dataclass(frozen=True)
class Settings:
    default_title: str = DEFAULT_TITLE
    default_description: str = DEFAULT_DESCRIPTION
    site_name: str = DEFAULT_SITE_NAME
    fallback_origin: str = DEFAULT_FALLBACK_ORIGIN
    data_url_template: str = DEFAULT_DATA_URL_TEMPLATE
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from the function app's application settings.

        Empty values count as unset. Values that fail validation are logged
        and replaced with their defaults.
        """
        env = os.environ if environ is None else environ

        def get(name: str, default: str) -> str:
            return (env.get(name) or "").strip() or default

        template = get("PREVIEW_DATA_URL_TEMPLATE", DEFAULT_DATA_URL_TEMPLATE)
        if "{filename}" not in template:
            logger.warning("PREVIEW_DATA_URL_TEMPLATE has no {filename} placeholder, using default")
            template = DEFAULT_DATA_URL_TEMPLATE

        return cls(
            default_title=get("PREVIEW_DEFAULT_TITLE", DEFAULT_TITLE),
            default_description=get("PREVIEW_DEFAULT_DESCRIPTION", DEFAULT_DESCRIPTION),
            site_name=get("PREVIEW_SITE_NAME", DEFAULT_SITE_NAME),
            # Normalize origin (no trailing slash)
            fallback_origin=get("PREVIEW_FALLBACK_ORIGIN", DEFAULT_FALLBACK_ORIGIN).rstrip("/"),
            data_url_template=template,
            fetch_timeout=_parse_timeout(env.get("PREVIEW_FETCH_TIMEOUT")),
        )

    def data_url(self, filename: str) -> str:
        return self.data_url_template.replace("{filename}", filename)


def _parse_timeout(raw) -> float:
    if not raw or not raw.strip():
        return DEFAULT_FETCH_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        logger.warning("PREVIEW_FETCH_TIMEOUT=%r is not a number, using %s", raw, DEFAULT_FETCH_TIMEOUT)
        return DEFAULT_FETCH_TIMEOUT
    if value <= 0:
        logger.warning("PREVIEW_FETCH_TIMEOUT must be positive, using %s", DEFAULT_FETCH_TIMEOUT)
        return DEFAULT_FETCH_TIMEOUT
    return value
