"""GitHub REST client for the ticket an ingestion was delivered on."""

import logging
from types import TracebackType
from typing import Self

import httpx

from qsvault.ingest.notify import Notifier

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"


class GitHubIssueClient(Notifier):
    """Posts comments to, and closes, a single GitHub issue."""

    def __init__(
        self,
        token: str,
        repository: str,
        issue_number: int,
        *,
        api_url: str = DEFAULT_API_URL,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        owner, _, repo = repository.partition("/")
        if not owner or not repo:
            raise ValueError(f"Repository must look like 'owner/repo', got {repository!r}")
        self.issue_url = f"{api_url.rstrip('/')}/repos/{owner}/{repo}/issues/{issue_number}"
        self._headers = {
            "Authorization": f"token {token}",
            "Accept": "application/vnd.github.v3+json",
        }
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=30.0)

    async def notify(self, message: str) -> None:
        """Post `message` as a comment on the issue.

        Raises:
            httpx.HTTPError: If the request fails or GitHub rejects it.
        """
        response = await self._http.post(
            f"{self.issue_url}/comments", json={"body": message}, headers=self._headers
        )
        response.raise_for_status()
        logger.debug("Posted comment to %s", self.issue_url)

    async def close_issue(self) -> None:
        """Mark the issue as closed.

        Raises:
            httpx.HTTPError: If the request fails or GitHub rejects it.
        """
        response = await self._http.patch(
            self.issue_url, json={"state": "closed"}, headers=self._headers
        )
        response.raise_for_status()
        logger.info("Closed %s", self.issue_url)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


def client_for_issue(
    token: str, repository: str, issue_number: int | None, *, api_url: str = DEFAULT_API_URL
) -> GitHubIssueClient | None:
    """Build a client when credentials and an issue number are all available."""
    if not token or not repository or issue_number is None:
        return None
    return GitHubIssueClient(token, repository, issue_number, api_url=api_url)
