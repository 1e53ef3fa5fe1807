from __future__ import annotations

import html
import re

from .models import Place

_TAG_PATTERN = re.compile(r"</?[^>]+(>|$)")
_WHITESPACE_PATTERN = re.compile(r"\s+")


def strip_markup(text: str | None) -> str:
    if not text:
        return ""
    return html.unescape(_TAG_PATTERN.sub("", text)).strip()


def normalize_title(text: str | None) -> str:
    return _WHITESPACE_PATTERN.sub(" ", strip_markup(text)).casefold()


def is_probable_duplicate(candidate: Place, existing: Place) -> bool:
    """Coordinate match when both sides are geocoded, otherwise title match."""

    if candidate.has_coordinates and existing.has_coordinates:
        return candidate.coordinates == existing.coordinates
    title = normalize_title(candidate.title)
    return bool(title) and title == normalize_title(existing.title)
