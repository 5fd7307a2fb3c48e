"""Interactive y/n confirmation before any release is modified."""

from __future__ import annotations

from typing import Callable, Optional

import click

ALL_RELEASES_PROMPT = "Are you sure you want to update all releases? (y/n)"
SINGLE_RELEASE_PROMPT = "Are you sure you want to update release {tag}? (y/n)"


def _ask(text: str) -> str:
    return click.prompt(text, default="", show_default=False, prompt_suffix=": ")


def confirm(prompt: str, ask: Optional[Callable[[str], str]] = None) -> bool:
    """Block until a non-empty answer is given; only an exact ``y`` accepts.

    ``ask`` reads one line after displaying its argument and defaults to a
    click prompt on the terminal.
    """
    ask = ask or _ask
    while True:
        answer = ask(prompt)
        if answer:
            return answer.strip() == "y"
