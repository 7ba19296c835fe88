"""Contentful Management API source — fetches content types over HTTPS.

Endpoint: ``GET {base_url}/spaces/{space}/environments/{env}/content_types``

Pages through the collection with ``limit`` / ``skip`` until ``total`` is
reached.  HTTP and transport failures surface as ``SchemaSourceError``
carrying the status code and the API's error body.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from contentforge.config import ReportSettings
from contentforge.models.schema import ContentType
from contentforge.sources import SchemaSourceError, parse_content_types

logger = logging.getLogger(__name__)


def _error_details(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


class ManagementApiSource:
    """Reads the content model of one space environment.

    Parameters
    ----------
    space_id:
        The Contentful space ID.
    management_token:
        A Content Management API token.
    environment_id:
        The environment to read.  Defaults to ``master``.
    base_url:
        API root, overridable for proxies and tests.
    page_limit:
        Items requested per page.
    timeout:
        Per-request timeout in seconds.
    transport:
        Optional ``httpx`` transport (tests pass ``httpx.MockTransport``).
    """

    def __init__(
        self,
        space_id: str,
        management_token: str,
        *,
        environment_id: str = "master",
        base_url: str = "https://api.contentful.com",
        page_limit: int = 1000,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._space_id = space_id
        self._token = management_token
        self._environment_id = environment_id
        self._base_url = base_url.rstrip("/")
        self._page_limit = max(page_limit, 1)
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: ReportSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> ManagementApiSource:
        return cls(
            settings.space_id,
            settings.management_token,
            environment_id=settings.environment_id,
            base_url=settings.api_base_url,
            page_limit=settings.page_limit,
            timeout=settings.request_timeout_seconds,
            transport=transport,
        )

    @property
    def source_name(self) -> str:
        return "management_api"

    @property
    def content_types_url(self) -> str:
        return (
            f"{self._base_url}/spaces/{self._space_id}"
            f"/environments/{self._environment_id}/content_types"
        )

    def fetch_content_types(self) -> list[ContentType]:
        """Fetch every content type in the environment."""
        items: list[Any] = []
        skip = 0

        with httpx.Client(
            headers={"Authorization": f"Bearer {self._token}"},
            timeout=self._timeout,
            transport=self._transport,
        ) as client:
            while True:
                payload = self._get_page(client, skip)
                page = payload.get("items") or []
                items.extend(page)
                skip += len(page)
                total = payload.get("total", skip)
                logger.debug("Fetched %d/%s content types", skip, total)
                if not page or skip >= total:
                    break

        logger.info(
            "Fetched %d content types from space %s (%s)",
            len(items),
            self._space_id,
            self._environment_id,
        )
        return parse_content_types(items)

    def _get_page(self, client: httpx.Client, skip: int) -> dict[str, Any]:
        try:
            response = client.get(
                self.content_types_url,
                params={"limit": self._page_limit, "skip": skip},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            details = _error_details(exc.response)
            raise SchemaSourceError(
                f"Management API returned HTTP {status} for {self.content_types_url}",
                status_code=status,
                details=details,
            ) from exc
        except httpx.HTTPError as exc:
            raise SchemaSourceError(f"Management API request failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise SchemaSourceError("Management API returned invalid JSON") from exc
        if not isinstance(payload, dict):
            raise SchemaSourceError("Management API returned an unexpected payload shape")
        return payload
