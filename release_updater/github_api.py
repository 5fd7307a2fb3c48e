"""GitHub API client for reading and editing repository releases."""

import logging
from typing import Any, Iterator, Optional
from urllib.parse import parse_qs, quote, urlparse

import requests

from .config import (
    DEFAULT_PER_PAGE,
    DEFAULT_TIMEOUT_SECONDS,
    GITHUB_ACCEPT,
    GITHUB_API_URL,
    GITHUB_API_VERSION,
    USER_AGENT,
)
from .errors import GitHubAPIError, NotFoundError, TransportError
from .models import Release

logger = logging.getLogger(__name__)

__all__ = [
    "GitHubAPIError",
    "GitHubClient",
    "NotFoundError",
    "TransportError",
]


def _next_page(response: requests.Response) -> Optional[int]:
    """Page number of the ``rel="next"`` link, or None on the last page."""
    link = response.links.get("next")
    if not link:
        return None
    pages = parse_qs(urlparse(link["url"]).query).get("page")
    if not pages:
        return None
    try:
        return int(pages[0])
    except ValueError:
        return None


def _json(response: requests.Response, context: str, tag: Optional[str] = None) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise TransportError(
            f"{context}: response is not JSON (HTTP {response.status_code})",
            status_code=response.status_code,
            tag=tag,
        ) from e


def _release(payload: Any, context: str, tag: Optional[str] = None) -> Release:
    try:
        return Release.from_api(payload)
    except (KeyError, TypeError, ValueError) as e:
        raise TransportError(f"{context}: unexpected release payload ({e!r})", tag=tag) from e


def _error_detail(response: requests.Response) -> str:
    try:
        message = response.json().get("message")
    except (ValueError, AttributeError):
        message = None
    return f"{response.status_code} {message or response.reason or ''}".strip()


class GitHubClient:
    """Handles the release endpoints of the GitHub REST API.

    No retries are attempted: every failure is reported to the caller once.
    """

    def __init__(self, token: str, base_url: str = GITHUB_API_URL,
                 timeout: Optional[float] = DEFAULT_TIMEOUT_SECONDS,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {token}",
            "Accept": GITHUB_ACCEPT,
            "User-Agent": USER_AGENT,
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        })

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def _request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        """Send a request; 404 responses are returned for the caller to interpret."""
        url = f"{self.base_url}{endpoint}" if endpoint.startswith("/") else endpoint
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            raise TransportError(f"{method} {url}: {e}") from e

        logger.debug("%s %s -> %d", method, url, response.status_code)
        if response.status_code == 404:
            return response
        if response.status_code >= 400:
            raise TransportError(
                f"{method} {url}: {_error_detail(response)}",
                status_code=response.status_code,
            )
        return response

    def get_release_by_tag(self, owner: str, repo: str, tag: str) -> Release:
        endpoint = f"/repos/{owner}/{repo}/releases/tags/{quote(tag, safe='')}"
        try:
            response = self._request("GET", endpoint)
        except TransportError as e:
            raise TransportError(
                f"failed to get release {tag}: {e}", status_code=e.status_code, tag=tag
            ) from e
        if response.status_code == 404:
            raise NotFoundError(f"release {tag} not found", status_code=404, tag=tag)
        context = f"failed to get release {tag}"
        return _release(_json(response, context, tag), context, tag)

    def iter_release_pages(self, owner: str, repo: str,
                           per_page: int = DEFAULT_PER_PAGE) -> Iterator[list[Release]]:
        """Yield releases one API page at a time, following ``Link`` headers."""
        endpoint = f"/repos/{owner}/{repo}/releases"
        page: Optional[int] = 1
        while page is not None:
            params = {"per_page": per_page, "page": page}
            try:
                response = self._request("GET", endpoint, params=params)
            except TransportError as e:
                raise TransportError(
                    f"failed to list releases: {e}", status_code=e.status_code
                ) from e
            if response.status_code == 404:
                raise NotFoundError(f"repository {owner}/{repo} not found", status_code=404)

            items = _json(response, "failed to list releases")
            if not isinstance(items, list):
                raise TransportError(
                    f"failed to list releases: expected a list, got {type(items).__name__}"
                )
            logger.debug("Fetched page %d of releases for %s/%s (%d items)",
                         page, owner, repo, len(items))
            yield [_release(item, "failed to list releases") for item in items]
            page = _next_page(response)

    def list_releases(self, owner: str, repo: str,
                      per_page: int = DEFAULT_PER_PAGE) -> list[Release]:
        """Fetch every release of a repository, newest first."""
        releases: list[Release] = []
        for page in self.iter_release_pages(owner, repo, per_page=per_page):
            releases.extend(page)
        return releases

    def edit_release(self, owner: str, repo: str, release: Release) -> Release:
        response = self._request(
            "PATCH",
            f"/repos/{owner}/{repo}/releases/{release.id}",
            json=release.to_edit_payload(),
        )
        if response.status_code == 404:
            raise NotFoundError(
                f"release {release.tag_name} not found", status_code=404, tag=release.tag_name
            )
        context = f"failed to update release {release.tag_name}"
        return _release(_json(response, context, release.tag_name), context, release.tag_name)
