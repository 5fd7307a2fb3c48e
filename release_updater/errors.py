"""Exception hierarchy shared by the client, the updater and the CLI."""

from __future__ import annotations

from typing import Optional


class ReleaseUpdaterError(Exception):
    pass


class UsageError(ReleaseUpdaterError):
    """Invalid combination of command-line selectors."""


class GitHubAPIError(ReleaseUpdaterError):
    """A request to the GitHub API failed.

    ``tag`` names the release the failure relates to, when there is one, so
    callers can match on it without parsing the message.
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None,
                 tag: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.tag = tag


class NotFoundError(GitHubAPIError):
    pass


class TransportError(GitHubAPIError):
    pass
