"""Main web application entry point."""

import uuid
from collections.abc import Awaitable, Callable
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import Response
from fastapi.staticfiles import StaticFiles
from portfolio.exceptions.site import FragmentNotFoundError, InvalidFragmentNameError, UnknownViewError
from portfolio.providers.config import ConfigProvider
from portfolio.providers.logging import LoggingProvider
from portfolio.web import pages
from portfolio.web.templates_config import templates
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

app = FastAPI(title=ConfigProvider.get_config().SITE_TITLE)
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")


static_path = Path(__file__).parent / "static"
app.mount("/static", StaticFiles(directory=static_path), name="static")

app.include_router(pages.router)

@app.middleware("http")
async def correlation_id_middleware(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    """Tags every log line written while serving a request with a request id.

    Args:
        request: The incoming request.
        call_next: The next handler in the chain.

    Returns:
        The response, carrying the request id in `X-Request-ID`.
    """
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    with LoggingProvider().set_correlation_id(request_id):
        response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


@app.exception_handler(UnknownViewError)
@app.exception_handler(FragmentNotFoundError)
@app.exception_handler(InvalidFragmentNameError)
async def not_found_handler(request: Request, exc: Exception) -> Response:
    """Renders the not-found page for unknown views and fragments.

    Args:
        request: The request object.
        exc: The raised exception.

    Returns:
        A 404 response in the visitor's language.
    """
    LoggingProvider().get_logger().info(f"Not found: {exc}")
    service = request.app.dependency_overrides.get(pages.get_site_service, pages.get_site_service)()
    context = service.context_for(request.cookies.get(service.config.LANGUAGE_COOKIE_NAME))
    return templates.TemplateResponse(
        request,
        "404.html",
        {
            "language": context.language,
            "site_title": service.config.SITE_TITLE,
            "message": context.table.lookup(context.language, "error.not_found") or "",
            "back_label": context.table.lookup(context.language, "error.back_home") or "/",
        },
        status_code=404,
    )


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint.

    Returns:
        Status dictionary.
    """
    return {"status": "ok"}
