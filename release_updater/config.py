"""Configuration constants for the Release Updater."""

# GitHub REST API
GITHUB_API_URL = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"
GITHUB_ACCEPT = "application/vnd.github+json"
USER_AGENT = "release-updater"

# Environment fallbacks for CLI options
TOKEN_ENV_VAR = "GITHUB_TOKEN"
API_URL_ENV_VAR = "GITHUB_API_URL"

# Listing releases: largest page size the API accepts
DEFAULT_PER_PAGE = 100
# None leaves requests without a client-side timeout
DEFAULT_TIMEOUT_SECONDS = None
