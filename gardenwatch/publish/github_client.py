"""GitHub REST API client for creating alert issues."""

import logging

import httpx

logger = logging.getLogger(__name__)

GITHUB_API_BASE = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"


class GitHubClientError(Exception):
    """Raised when the GitHub API returns an error."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class GitHubClient:
    """Thin wrapper around the GitHub issues endpoint."""

    def __init__(
        self,
        token: str,
        owner: str,
        repo: str,
        base_url: str = GITHUB_API_BASE,
        timeout: float = 30.0,
    ):
        if not token:
            raise GitHubClientError("GitHub token not set")
        self.token = token
        self.owner = owner
        self.repo = repo
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }

    def _request(self, method: str, endpoint: str, data: dict | None = None) -> dict:
        """Make an authenticated request to the GitHub API."""
        url = f"{self.base_url}{endpoint}"
        try:
            resp = httpx.request(
                method, url, headers=self._headers(),
                json=data, timeout=self.timeout,
            )
        except httpx.RequestError as e:
            logger.error("GitHub API request failed: %s %s -> %s", method, endpoint, e)
            raise GitHubClientError(f"Request failed: {e}") from e

        if resp.status_code >= 400:
            body = resp.text
            logger.error("GitHub API %d: %s %s -> %s", resp.status_code, method, endpoint, body)
            raise GitHubClientError(f"HTTP {resp.status_code}: {body}", resp.status_code)

        try:
            result = resp.json()
        except ValueError as e:
            logger.error("GitHub API %s %s returned non-JSON body", method, endpoint)
            raise GitHubClientError(
                f"Response is not JSON: {e}", resp.status_code
            ) from e
        if not isinstance(result, dict):
            raise GitHubClientError("Response is not a JSON object", resp.status_code)
        return result

    def create_issue(self, title: str, body: str, labels: list[str]) -> dict:
        """Create an issue in the configured repository.

        Returns:
            Issue dict as returned by GitHub; `number` identifies it.
        """
        return self._request(
            "POST",
            f"/repos/{self.owner}/{self.repo}/issues",
            {"title": title, "body": body, "labels": labels},
        )
