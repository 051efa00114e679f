"""Wiki page routes: view, edit, save and the page index."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates

from flatwiki.config import settings
from flatwiki.markup import process_body
from flatwiki.models import Page
from flatwiki.services.pages import PageNotFoundError, PageStore, get_page_store
from flatwiki.templating import get_templates, render_template
from flatwiki.titles import get_title, has_title_prefix, valid_title

router = APIRouter()

FALLBACK_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]


@router.get("/", include_in_schema=False)
def home():
    return RedirectResponse(f"/view/{settings.front_page}", status_code=302)


@router.get("/view/{title}")
def view_page(
    request: Request,
    title: str = Depends(valid_title),
    store: PageStore = Depends(get_page_store),
    templates: Jinja2Templates = Depends(get_templates),
):
    try:
        page = store.load(title)
    except PageNotFoundError:
        return RedirectResponse(f"/edit/{title}", status_code=302)
    page.rendered_body = process_body(page.body)
    return render_template(templates, request, "view", {"page": page})


@router.get("/edit/{title}")
def edit_page(
    request: Request,
    title: str = Depends(valid_title),
    store: PageStore = Depends(get_page_store),
    templates: Jinja2Templates = Depends(get_templates),
):
    try:
        page = store.load(title)
    except PageNotFoundError:
        page = Page(title=title)
    return render_template(templates, request, "edit", {"page": page})


@router.post("/save/{title}")
def save_page(
    title: str = Depends(valid_title),
    body: str = Form(""),
    store: PageStore = Depends(get_page_store),
):
    """Overwrite the page with the submitted body. OSError becomes a 500."""
    store.save(Page(title=title, body=body.encode("utf-8")))
    return RedirectResponse(f"/view/{title}", status_code=302)


@router.get("/all")
def all_pages(
    request: Request,
    store: PageStore = Depends(get_page_store),
    templates: Jinja2Templates = Depends(get_templates),
):
    titles = store.list_titles()
    return render_template(templates, request, "all", {"titles": titles})


@router.api_route("/{path:path}", methods=FALLBACK_METHODS, include_in_schema=False)
def fallback(request: Request):
    """Unmatched paths go to the front page, except under the title prefixes."""
    path = request.url.path
    if has_title_prefix(path):
        get_title(path)
        raise HTTPException(status_code=405, detail="Method Not Allowed")
    return home()
