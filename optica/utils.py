"""Small text helpers shared by the parser."""

from __future__ import annotations


def split_string(data: str, splitter: str) -> list[str]:
    """Split ``data`` on every ``splitter``, keeping empty pieces.

    An empty input yields no pieces at all.
    """
    if not data:
        return []
    return data.split(splitter)