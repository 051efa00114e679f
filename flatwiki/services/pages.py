"""Flat-file page storage: one <title>.txt file per page."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from flatwiki.config import settings
from flatwiki.models import Page
from flatwiki.titles import is_valid_title

logger = logging.getLogger("flatwiki.pages")

PAGE_SUFFIX = ".txt"
PAGE_FILE_MODE = 0o600


class PageNotFoundError(Exception):
    """Raised when a page file cannot be read, whatever the underlying cause."""

    def __init__(self, title: str):
        super().__init__(f"Page '{title}' not found")
        self.title = title


class PageStore:
    def __init__(self, data_dir: Path | str):
        self.data_dir = Path(data_dir)

    def path_for(self, title: str) -> Path:
        if not is_valid_title(title):
            raise ValueError(f"Invalid page title: {title!r}")
        return self.data_dir / f"{title}{PAGE_SUFFIX}"

    def ensure_data_dir(self) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def load(self, title: str) -> Page:
        # Permission errors and the like are reported the same way as absence.
        try:
            body = self.path_for(title).read_bytes()
        except OSError as e:
            raise PageNotFoundError(title) from e
        return Page(title=title, body=body)

    def save(self, page: Page) -> None:
        """Write the page body verbatim. No locking: the last writer wins."""
        fd = os.open(
            self.path_for(page.title),
            os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
            PAGE_FILE_MODE,
        )
        with os.fdopen(fd, "wb") as f:
            f.write(page.body)
        logger.info("Saved page %s (%d bytes)", page.title, len(page.body))

    def list_titles(self) -> list[str]:
        """Titles of every page file in the data directory, sorted by name."""
        return sorted(
            entry.stem for entry in self.data_dir.iterdir() if entry.suffix == PAGE_SUFFIX
        )


def get_page_store() -> PageStore:
    return PageStore(settings.data_dir)
