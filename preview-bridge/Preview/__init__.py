import logging
from typing import Optional

import azure.functions as func
import requests

from .config import Settings
from .metadata import fetch_devotion_meta
from .render import RenderParams, render_page
from .slug import parse_slug
from .urls import to_origin, to_single

logger = logging.getLogger(__name__)

HTML_CONTENT_TYPE = "text/html; charset=utf-8"
CACHE_CONTROL = "public, s-maxage=900, stale-while-revalidate=86400"


def main(req: func.HttpRequest) -> func.HttpResponse:
    return handle_preview(req, Settings.from_env())


def handle_preview(req: func.HttpRequest, settings: Settings,
                   session: Optional[requests.Session] = None) -> func.HttpResponse:
    # ?slug= wins over the optional {slug} route segment
    slug = to_single(req.params.get("slug")) or to_single(req.route_params.get("slug"))
    origin = to_origin(req.headers, settings.fallback_origin)
    parsed = parse_slug(slug)

    if parsed is None:
        logger.info("Rejected preview slug %r", slug[:40])
        body = render_page(
            RenderParams(
                title=settings.default_title,
                description=settings.default_description,
                image_url="",
                target_url=f"{origin}/",
            ),
            settings,
        )
        return _html_response(body, status_code=400)

    target_url = f"{origin}{parsed.app_path}"
    title = settings.default_title
    description = settings.default_description
    image_url = ""

    result = fetch_devotion_meta(parsed.filename, origin, settings, session=session)
    if result.ok:
        meta = result.meta
        title = meta.title or title
        description = meta.subtitle or description
        image_url = meta.image_url or ""

    logger.info("Preview for %s (metadata %s)", parsed.app_path, "found" if result.ok else "unavailable")
    body = render_page(
        RenderParams(title=title, description=description, image_url=image_url, target_url=target_url),
        settings,
    )
    return _html_response(body, status_code=200, headers={"Cache-Control": CACHE_CONTROL})


def _html_response(body: str, status_code: int, headers: Optional[dict] = None) -> func.HttpResponse:
    return func.HttpResponse(
        body,
        status_code=status_code,
        headers={"Content-Type": HTML_CONTENT_TYPE, **(headers or {})},
    )
