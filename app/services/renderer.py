"""
Build Page Renderer
===================
Jinja2 rendering of the builds page.

    renderer = get_renderer()
    html = renderer.render("Fennec", builds)

Every string in a build comes from the upstream API, so the environment
auto-escapes HTML. Undefined names are strict: a template that references a
missing attribute fails with RenderError instead of printing an empty cell.

The template file is checked for changes on each load (Jinja2 auto_reload),
so the page reflects the file on disk without a restart.
"""
import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path
from urllib.parse import urlsplit
from typing import Optional, Sequence, Union

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
    select_autoescape,
)

from app.core.constants import TEMPLATE_NAME
from app.core.errors import RenderError, TemplateLoadError
from app.models.build import Build, ZERO_TIME

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

_SAFE_URL_SCHEMES = {"http", "https", "mailto"}

_STATUS_CLASSES = {
    "success": "success",
    "failed": "failed",
    "failure": "failed",
    "cancelled": "failed",
    "running": "running",
    "queued": "running",
}


class BuildPageRenderer:
    """Renders the builds page template against an application and its builds."""

    def __init__(
        self,
        template_dir: Optional[Union[str, Path]] = None,
        template_name: str = TEMPLATE_NAME,
    ) -> None:
        self.template_dir = Path(template_dir) if template_dir else TEMPLATE_DIR
        self.template_name = template_name
        self.env = Environment(
            loader=FileSystemLoader(self.template_dir),
            autoescape=select_autoescape(["html", "xml"]),
            undefined=StrictUndefined,
            auto_reload=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["format_timestamp"] = format_timestamp
        self.env.filters["format_duration"] = format_duration
        self.env.filters["status_class"] = status_class
        self.env.filters["safe_url"] = safe_url
        self.env.tests["zero_time"] = is_zero_time

    def load_template(self) -> Template:
        try:
            return self.env.get_template(self.template_name)
        except TemplateNotFound as exc:
            raise TemplateLoadError(
                f"Template {self.template_name!r} not found in {self.template_dir}"
            ) from exc
        except TemplateSyntaxError as exc:
            raise TemplateLoadError(
                f"Template {self.template_name!r} is invalid (line {exc.lineno}): {exc.message}"
            ) from exc

    def render(self, application: str, builds: Sequence[Build]) -> str:
        """
        Render the page.

        Raises TemplateLoadError if the template cannot be loaded and
        RenderError if executing it fails.
        """
        template = self.load_template()
        try:
            return template.render(application=application, builds=builds)
        except TemplateError as exc:
            raise RenderError(f"Rendering {self.template_name!r} failed: {exc}") from exc
        except Exception as exc:
            raise RenderError(f"Rendering {self.template_name!r} failed: {exc!r}") from exc


_renderer: Optional[BuildPageRenderer] = None


def get_renderer() -> BuildPageRenderer:
    """Process-wide renderer for the bundled template directory."""
    global _renderer
    if _renderer is None:
        _renderer = BuildPageRenderer()
        logger.debug("Template environment created for %s", _renderer.template_dir)
    return _renderer


# Template filters


def format_timestamp(value: datetime) -> str:
    """Render a timestamp in UTC, or '-' for the zero time."""
    if value == ZERO_TIME:
        return "-"
    return value.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")


def format_duration(value: timedelta) -> str:
    """
    Compact duration text, e.g. '1h2m3s', '4m0s', '-45s', '0s'.

    Sub-second precision is dropped (truncated toward zero).
    """
    seconds = int(value.total_seconds())
    sign = "-" if seconds < 0 else ""
    seconds = abs(seconds)
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{sign}{hours}h{minutes}m{secs}s"
    if minutes:
        return f"{sign}{minutes}m{secs}s"
    return f"{sign}{secs}s"


def status_class(status: str) -> str:
    """CSS class for a build status."""
    return _STATUS_CLASSES.get(status.lower(), "other")


def safe_url(value: str) -> str:
    """
    Pass through http, https and mailto links; anything else becomes '#'.

    Autoescaping does not look at the scheme of a URL.
    """
    try:
        scheme = urlsplit(value.strip()).scheme
    except ValueError:
        return "#"
    return value if scheme in _SAFE_URL_SCHEMES else "#"


def is_zero_time(value: datetime) -> bool:
    """Jinja test: the timestamp was never set upstream."""
    return value == ZERO_TIME
