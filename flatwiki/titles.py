"""Title validation for /view, /edit and /save paths."""

from __future__ import annotations

import re

from fastapi import HTTPException, Request

from flatwiki.models import TITLE_PATTERN

VALID_PATH = re.compile(r"^/(edit|save|view)/([a-zA-Z0-9]+)$")
TITLE_PREFIX = re.compile(r"^/(edit|save|view)(/|$)")
_VALID_TITLE = re.compile(TITLE_PATTERN)


def is_valid_title(title: str) -> bool:
    return bool(_VALID_TITLE.fullmatch(title))


def has_title_prefix(path: str) -> bool:
    return TITLE_PREFIX.match(path) is not None


def get_title(path: str) -> str:
    """Return the page title embedded in a path, or raise a 404."""
    m = VALID_PATH.fullmatch(path)
    if m is None:
        raise HTTPException(status_code=404, detail="Not Found")
    return m.group(2)


def valid_title(request: Request) -> str:
    """Dependency: validate the request path before the handler runs."""
    return get_title(request.url.path)
