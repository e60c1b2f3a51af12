import re
from dataclasses import dataclass
from typing import Optional

# DD-MM-YYYY-LANG with ASCII digits; day/month ranges are not checked
SLUG_RE = re.compile(r"(\d{2})-(\d{2})-(\d{4})-(EN|TA)", re.IGNORECASE | re.ASCII)


@dataclass(frozen=True)
class ParsedSlug:
    filename: str
    app_path: str


def parse_slug(slug: Optional[str]) -> Optional[ParsedSlug]:
    """Decode a devotion slug such as ``15-08-2024-en``.

    Returns None when the slug is missing or malformed.
    """
    if not slug:
        return None

    match = SLUG_RE.fullmatch(slug.strip("/"))
    if not match:
        return None

    day, month, year, lang = match.groups()
    key = f"{day}-{month}-{year}-{lang.upper()}"
    return ParsedSlug(filename=f"{key}.json", app_path=f"/{key}")
