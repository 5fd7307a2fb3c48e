from __future__ import annotations

import logging
from typing import Optional, Sequence

import click
from rich.logging import RichHandler

from . import __version__
from .config import API_URL_ENV_VAR, DEFAULT_TIMEOUT_SECONDS, GITHUB_API_URL, TOKEN_ENV_VAR
from .errors import ReleaseUpdaterError
from .models import UpdateRequest
from .updater import ReleaseUpdater

PROG_NAME = "update-release"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
    )


@click.command(
    name=PROG_NAME,
    help="Update strings in GitHub releases.",
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option("-o", "--owner", required=True, help="GitHub repository organization or owner.")
@click.option("-r", "--repo", required=True, help="GitHub repository name.")
@click.option("-l", "--value", required=True, help="Value to replace.")
@click.option("-p", "--replacement", required=True, help="Replacement value.")
@click.option(
    "-t", "--token", required=True, envvar=TOKEN_ENV_VAR,
    help=f"GitHub personal access token (default: ${TOKEN_ENV_VAR}).",
)
@click.option("-a", "--all", "all_releases", is_flag=True, help="Update all releases.")
@click.option("-s", "--release", "tag", default=None, help="Update a specific release.")
@click.option(
    "--api-url", default=GITHUB_API_URL, envvar=API_URL_ENV_VAR, show_default=True,
    help="GitHub API base URL, for GitHub Enterprise Server.",
)
@click.option(
    "--timeout", type=float, default=DEFAULT_TIMEOUT_SECONDS,
    help="Timeout per API request, in seconds (default: none).",
)
@click.option("-v", "--verbose", is_flag=True, help="Log API traffic.")
@click.version_option(__version__, prog_name=PROG_NAME)
@click.pass_context
def cli(ctx: click.Context, owner: str, repo: str, value: str, replacement: str,
        token: str, all_releases: bool, tag: Optional[str], api_url: str,
        timeout: Optional[float], verbose: bool) -> int:
    _configure_logging(verbose)

    request = UpdateRequest(
        owner=owner,
        repo=repo,
        value=value,
        replacement=replacement,
        token=token,
        all_releases=all_releases,
        tag=tag,
    )
    updater = ReleaseUpdater(api_url=api_url, timeout=timeout)
    try:
        updater.run(request)
    except ReleaseUpdaterError as error:
        click.echo(f"Error: {error}")
        ctx.exit(1)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        rv = cli.main(args=argv, prog_name=PROG_NAME, standalone_mode=False)
    except click.ClickException as error:
        click.echo(f"Error: {error.format_message()}")
        return 1
    except click.Abort:
        click.echo("Aborted!")
        return 1
    return rv or 0


if __name__ == "__main__":
    raise SystemExit(main())
