import html
import json
from dataclasses import dataclass

from .config import Settings

PAGE_TEMPLATE = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>{title}</title>
    <meta name="description" content="{description}" />
    <meta property="og:type" content="article" />
    <meta property="og:site_name" content="{site_name}" />
    <meta property="og:title" content="{title}" />
    <meta property="og:description" content="{description}" />
    <meta property="og:image" content="{image_url}" />
    <meta property="og:url" content="{target_url}" />
    <meta name="twitter:card" content="summary_large_image" />
    <meta name="twitter:title" content="{title}" />
    <meta name="twitter:description" content="{description}" />
    <meta name="twitter:image" content="{image_url}" />
    <meta http-equiv="refresh" content="0;url={target_url}" />
    <link rel="canonical" href="{target_url}" />
    <script>window.location.replace({target_js});</script>
  </head>
  <body>
    <p>Redirecting to <a href="{target_url}">{target_url}</a>...</p>
  </body>
</html>"""

# Keeps a JSON string literal from closing the surrounding <script>
_SCRIPT_SAFE = {ord("<"): "\\u003c", ord(">"): "\\u003e", ord("&"): "\\u0026"}


@dataclass(frozen=True)
class RenderParams:
    title: str
    description: str
    image_url: str
    target_url: str


def escape(value: str) -> str:
    return html.escape(value or "", quote=True)


def script_string(value: str) -> str:
    """JSON string literal that is safe to embed inside a <script> element."""
    return json.dumps(value).translate(_SCRIPT_SAFE)


def render_page(params: RenderParams, settings: Settings) -> str:
    """Build the social preview document that redirects to ``params.target_url``.

    The target URL is encoded twice: HTML-escaped for attributes and text,
    and as a script literal (from the raw value) for the client-side redirect.
    """
    return PAGE_TEMPLATE.format(
        title=escape(params.title or settings.default_title),
        description=escape(params.description or settings.default_description),
        site_name=escape(settings.site_name),
        image_url=escape(params.image_url),
        target_url=escape(params.target_url),
        target_js=script_string(params.target_url),
    )
