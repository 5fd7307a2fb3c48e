"""Literal substring replacement on release bodies."""

from __future__ import annotations


def replace_body(body: str, value: str, replacement: str) -> tuple[str, bool]:
    """Replace every occurrence of ``value`` in ``body`` with ``replacement``.

    Matching is exact and case-sensitive, left to right, non-overlapping.
    Returns the new body and whether it differs from the input.
    """
    if not value:
        return body, False
    new_body = body.replace(value, replacement)
    return new_body, new_body != body
