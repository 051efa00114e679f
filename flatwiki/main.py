"""flatwiki: a personal wiki backed by flat text files."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from jinja2 import TemplateError
from starlette.exceptions import HTTPException as StarletteHTTPException

from flatwiki.api.router import api_router
from flatwiki.config import settings
from flatwiki.request_log_middleware import RequestLogMiddleware
from flatwiki.services.pages import get_page_store
from flatwiki.templating import TEMPLATE_NAMES, templates

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger("flatwiki")


@asynccontextmanager
async def lifespan(app: FastAPI):
    store = get_page_store()
    store.ensure_data_dir()
    logger.info("Serving pages from %s", store.data_dir.resolve())

    for name in TEMPLATE_NAMES:
        templates.get_template(f"{name}.html")

    yield

    logger.info("Shutting down")


app = FastAPI(
    title="flatwiki",
    description="Personal wiki backed by flat text files",
    version="0.1.0",
    lifespan=lifespan,
    redirect_slashes=False,
)

app.add_middleware(RequestLogMiddleware)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code)


@app.exception_handler(OSError)
async def os_error_handler(request: Request, exc: OSError):
    logger.error("I/O error on %s %s", request.method, request.url.path, exc_info=exc)
    return PlainTextResponse(str(exc), status_code=500)


@app.exception_handler(TemplateError)
async def template_error_handler(request: Request, exc: TemplateError):
    logger.error("Template error on %s %s", request.method, request.url.path, exc_info=exc)
    return PlainTextResponse(str(exc), status_code=500)


@app.get("/health")
async def health():
    return {"status": "ok"}


# Registered last: the page router ends with a catch-all route
app.include_router(api_router)


def main():
    import uvicorn

    uvicorn.run(
        "flatwiki.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )


if __name__ == "__main__":
    main()
