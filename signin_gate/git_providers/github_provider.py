# AGPL-3.0 License

"""
GitHub REST implementation of the host capabilities.
"""

from typing import Any, Optional

import httpx

from signin_gate.algo.types import ChangeRecord
from signin_gate.config_loader import get_settings
from signin_gate.git_providers.event_context import PullRequestEvent
from signin_gate.git_providers.git_provider import GitProvider, HostUnavailable
from signin_gate.log import get_logger


class GithubProvider(GitProvider):
    """
    Talks to the GitHub REST API for one pull request.

    File listing and comments go to the base repository; blob lookups go to
    the head repository, since a fork's blobs only exist there.
    Use as an async context manager so the HTTP client is closed.
    """

    def __init__(
        self,
        event: PullRequestEvent,
        token: str,
        base_url: Optional[str] = None,
        per_page: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self.event = event
        self.per_page = per_page or settings.github.per_page
        self.logger = get_logger()
        self._client = httpx.AsyncClient(
            base_url=(base_url or settings.github.base_url).rstrip("/"),
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
            },
            transport=transport,
        )

    async def __aenter__(self) -> "GithubProvider":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, url: str, **kwargs) -> Any:
        try:
            response = await self._client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            self.logger.error(
                f"GitHub API error ({e.response.status_code}): {url}",
                artifact={"body": e.response.text},
            )
            raise HostUnavailable(f"GitHub API error {e.response.status_code}: {url}") from e
        except httpx.HTTPError as e:
            self.logger.error(f"GitHub API request failed: {url}: {e}")
            raise HostUnavailable(f"GitHub API request failed: {url}") from e
        try:
            return response.json()
        except ValueError as e:
            raise HostUnavailable(f"GitHub API returned invalid JSON: {url}") from e

    async def get_pr_files(self, pr_number: int) -> list[ChangeRecord]:
        """Collect all pages until one comes back short."""
        url = f"/repos/{self.event.base_full_name}/pulls/{pr_number}/files"
        records: list[ChangeRecord] = []
        page = 1
        while True:
            batch = await self._request(
                "GET", url, params={"per_page": self.per_page, "page": page}
            )
            if not isinstance(batch, list):
                raise HostUnavailable(f"Unexpected files page {page} for PR #{pr_number}: expected a list")
            try:
                records.extend(ChangeRecord.from_github(entry) for entry in batch)
            except (KeyError, TypeError, AttributeError) as e:
                raise HostUnavailable(f"Malformed file entry on page {page} for PR #{pr_number}") from e
            if len(batch) < self.per_page:
                break
            page += 1

        self.logger.info(f"Fetched {len(records)} changed file(s) in {page} page(s) for PR #{pr_number}")
        return records

    async def get_blob_size(self, content_ref: str) -> Any:
        blob = await self._request(
            "GET", f"/repos/{self.event.head_full_name}/git/blobs/{content_ref}"
        )
        return blob.get("size") if isinstance(blob, dict) else None

    async def publish_comment(self, pr_number: int, body: str) -> None:
        await self._request(
            "POST",
            f"/repos/{self.event.base_full_name}/issues/{pr_number}/comments",
            json={"body": body},
        )
