"""Pydantic models for wiki pages."""

from __future__ import annotations

from pydantic import BaseModel, Field

TITLE_PATTERN = r"^[a-zA-Z0-9]+$"


class Page(BaseModel):
    title: str = Field(pattern=TITLE_PATTERN, description="Page title, also the file stem")
    body: bytes = Field(default=b"", description="Raw page body as stored on disk")
    rendered_body: str | None = Field(
        default=None, description="Displayable HTML, computed on view and never stored"
    )

    @property
    def text(self) -> str:
        """Body decoded for display in the edit form."""
        return self.body.decode("utf-8", errors="replace")
