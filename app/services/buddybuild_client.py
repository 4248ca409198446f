"""
BuddyBuild Client
=================
Read-only client for the BuddyBuild builds endpoint.

    GET {api_base_url}/v1/apps/{app_id}/builds?limit=100&branch={branch}
    Authorization: Bearer <token>

An empty branch is forwarded as `branch=`; whatever filtering that implies is
left to the upstream. Results keep upstream order (newest first).

One request per call. No retries, no caching. Non-2xx statuses are reported
as TransportError regardless of whether the body happens to parse.
"""
import logging
from typing import List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from app.core.config import BuddyBuildConfig
from app.core.constants import BUILDS_LIMIT
from app.core.errors import DecodeError, TransportError
from app.models.build import Build

logger = logging.getLogger(__name__)

# A top-level JSON null is an empty build list.
_BUILD_LIST = TypeAdapter(Optional[List[Build]])


class BuddyBuildClient:
    """
    Fetches build records for one application.

    An injected httpx.AsyncClient is used as-is and left open; otherwise a
    client is created for the call and closed afterwards.
    """

    def __init__(
        self,
        config: BuddyBuildConfig,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.config = config
        self._http_client = http_client
        self.headers = {
            "Accept": "application/json",
            "Authorization": f"Bearer {config.access_token}",
            "User-Agent": "Fennec-Builds-Board",
        }

    def builds_url(self) -> str:
        return f"{self.config.api_base_url}/v1/apps/{self.config.app_id}/builds"

    async def get_builds(self, branch: str = "") -> List[Build]:
        """
        Fetch up to BUILDS_LIMIT builds, optionally filtered by branch.

        Raises TransportError if the request cannot complete or the upstream
        answers with a non-2xx status, DecodeError if the body is not a JSON
        array of builds.
        """
        params = {"limit": BUILDS_LIMIT, "branch": branch}
        logger.info("Fetching builds for app %s (branch=%r)", self.config.app_id, branch)

        if self._http_client is not None:
            response = await self._send(self._http_client, params)
        else:
            async with httpx.AsyncClient() as client:
                response = await self._send(client, params)

        builds = self._decode(response)
        logger.debug("Received %d builds for app %s", len(builds), self.config.app_id)
        return builds

    async def _send(self, client: httpx.AsyncClient, params: dict) -> httpx.Response:
        try:
            response = await client.get(
                self.builds_url(),
                params=params,
                headers=self.headers,
                timeout=self.config.timeout,
            )
        except httpx.HTTPError as exc:
            raise TransportError(f"Request to BuddyBuild failed: {exc!r}") from exc

        if not response.is_success:
            raise TransportError(
                f"BuddyBuild answered HTTP {response.status_code}",
                status_code=response.status_code,
            )
        return response

    @staticmethod
    def _decode(response: httpx.Response) -> List[Build]:
        try:
            return _BUILD_LIST.validate_json(response.content) or []
        except ValidationError as exc:
            first = exc.errors()[0]
            raise DecodeError(
                f"Unexpected builds payload ({exc.error_count()} error(s)), "
                f"first at {first['loc']}: {first['msg']}"
            ) from exc
