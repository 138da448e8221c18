"""Helpers for putting filesystem names in front of the user."""

from __future__ import annotations


def display_text(text: str) -> str:
    """Return ``text`` with undecodable filename bytes replaced by U+FFFD.

    ``os`` functions hand back names that are not valid UTF-8 with surrogate
    escapes, which a strict UTF-8 stream refuses to encode.
    """
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
