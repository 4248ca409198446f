"""
GET /
Lists the most recent builds of the configured application as an HTML page.

Query parameters:
    branch — optional branch filter, forwarded to BuddyBuild as-is

Responses:
    200 text/html   — the rendered builds page
    500 text/plain  — "Internal Server Error", whatever stage failed
"""
import logging
from http import HTTPStatus

from fastapi import APIRouter, Query
from fastapi.responses import PlainTextResponse, Response

from app.core.config import load_config
from app.core.errors import (
    BuildsBoardError,
    ConfigurationError,
    TemplateLoadError,
)
from app.services.buddybuild_client import BuddyBuildClient
from app.services.renderer import get_renderer

logger = logging.getLogger(__name__)

router = APIRouter()


def _internal_error() -> PlainTextResponse:
    status = HTTPStatus.INTERNAL_SERVER_ERROR
    return PlainTextResponse(status.phrase, status_code=status.value)


@router.get("/", response_class=Response)
async def list_builds(branch: str = Query("")) -> Response:
    try:
        config = load_config()
    except ConfigurationError as exc:
        logger.error("Configuration error: %s", exc)
        return _internal_error()

    client = BuddyBuildClient(config)
    try:
        builds = await client.get_builds(branch)
    except BuildsBoardError as exc:
        logger.error("Failed to retrieve builds: %s", exc)
        return _internal_error()

    try:
        body = get_renderer().render(config.application_name, builds)
    except TemplateLoadError as exc:
        logger.error("Failed to load template: %s", exc)
        return _internal_error()
    except BuildsBoardError as exc:
        logger.error("Failed to render template: %s", exc)
        return _internal_error()

    logger.info("Rendered %d builds for %s (branch=%r)", len(builds), config.application_name, branch)
    return Response(content=body, media_type="text/html")
