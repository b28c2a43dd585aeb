"""Invariant checks for case content."""

from __future__ import annotations

from typing import Iterable


def require_text(value: str) -> str:
    if not value.strip():
        raise ValueError("must be a non-empty string")
    return value


def first_duplicate(ids: Iterable[str]) -> str | None:
    seen: set[str] = set()
    for item_id in ids:
        if item_id in seen:
            return item_id
        seen.add(item_id)
    return None
