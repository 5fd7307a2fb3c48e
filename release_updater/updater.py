"""Fetch releases, rewrite their bodies, and push the ones that changed."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from rich.console import Console

from .config import DEFAULT_TIMEOUT_SECONDS, GITHUB_API_URL
from .errors import GitHubAPIError, TransportError
from .github_api import GitHubClient
from .models import Release, RunResult, TargetMode, UpdateRequest
from .prompt import ALL_RELEASES_PROMPT, SINGLE_RELEASE_PROMPT, confirm
from .transform import replace_body

logger = logging.getLogger(__name__)

console = Console(highlight=False, emoji=False)

ClientFactory = Callable[[UpdateRequest], GitHubClient]


class ReleaseUpdater:
    """Runs one update request from confirmation through to the last write.

    The client is only built once the selectors are valid and the user has
    confirmed, so a rejected or declined run never touches the network.
    """

    def __init__(self, client_factory: Optional[ClientFactory] = None,
                 ask: Optional[Callable[[str], str]] = None,
                 out: Optional[Console] = None,
                 api_url: str = GITHUB_API_URL,
                 timeout: Optional[float] = DEFAULT_TIMEOUT_SECONDS):
        self.client_factory = client_factory or self._build_client
        self.api_url = api_url
        self.timeout = timeout
        self.ask = ask
        self.out = out or console

    def _build_client(self, request: UpdateRequest) -> GitHubClient:
        return GitHubClient(request.token, base_url=self.api_url, timeout=self.timeout)

    def _say(self, message: str) -> None:
        self.out.print(message, markup=False, emoji=False, soft_wrap=True)

    def update_release(self, client: GitHubClient, request: UpdateRequest,
                       release: Release, result: Optional[RunResult] = None) -> bool:
        """Write ``release`` back if the replacement changes its body.

        Returns True when an edit call was made.
        """
        new_body, changed = replace_body(release.body, request.value, request.replacement)
        if not changed:
            self._say(f"{release.tag_name}: No changes to release body found, skipping")
            if result is not None:
                result.skipped.append(release.tag_name)
            return False

        release.body = new_body
        self._say(f"{release.tag_name}: Updating release body")
        try:
            client.edit_release(request.owner, request.repo, release)
        except GitHubAPIError as e:
            raise TransportError(
                f"{release.tag_name}: failed to update release body: {e}",
                status_code=e.status_code,
                tag=release.tag_name,
            ) from e
        logger.info("Updated release %s in %s", release.tag_name, request.full_name)
        if result is not None:
            result.updated.append(release.tag_name)
        return True

    def _prompt_for(self, request: UpdateRequest) -> str:
        if request.target_mode is TargetMode.ALL:
            return ALL_RELEASES_PROMPT
        return SINGLE_RELEASE_PROMPT.format(tag=request.tag)

    def run(self, request: UpdateRequest) -> RunResult:
        request.validate()
        result = RunResult()

        if not confirm(self._prompt_for(request), ask=self.ask):
            self._say("Invalid response, aborting")
            result.aborted = True
            return result

        with self.client_factory(request) as client:
            if request.target_mode is TargetMode.ALL:
                self._say("Fetching all releases")
                releases = client.list_releases(request.owner, request.repo)
                logger.debug("Fetched %d releases from %s", len(releases), request.full_name)
                for release in releases:
                    self._say(f"{release.tag_name}: Checking for updates to release body")
                    self.update_release(client, request, release, result)
            else:
                release = client.get_release_by_tag(request.owner, request.repo, request.tag)
                self.update_release(client, request, release, result)

        return result
