"""Jinja2 template environment, built once at import and only read afterwards."""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from flatwiki.config import settings

TEMPLATE_NAMES = ("view", "edit", "wiki_link", "all")

templates = Jinja2Templates(directory=str(settings.templates_dir))


def get_templates() -> Jinja2Templates:
    return templates


def render_template(
    env: Jinja2Templates, request: Request, name: str, context: dict
) -> HTMLResponse:
    """Render one of the named templates. Template errors propagate to the app handler."""
    return env.TemplateResponse(request, f"{name}.html", context)
