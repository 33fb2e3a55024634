"""Web pages router."""

from functools import lru_cache

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse, Response
from portfolio.providers.preferences import PreferenceStore
from portfolio.services.site import CASE_FRAGMENT_PREFIX, CASE_VIEW_PREFIX, HOME_VIEW, SiteService

router = APIRouter()


@lru_cache
def get_site_service() -> SiteService:
    """Returns the shared site service.

    The translation table is read once, on first use.

    Returns:
        The site service.
    """
    return SiteService()


def _preferences(request: Request, service: SiteService) -> PreferenceStore:
    return PreferenceStore(cookies=request.cookies, config=service.config)


def _safe_next(next_url: str | None) -> str:
    if next_url and next_url.startswith("/") and not next_url.startswith("//"):
        return next_url
    return "/"


@router.get("/", name="home", response_class=HTMLResponse)
async def home(request: Request, service: SiteService = Depends(get_site_service)) -> Response:  # noqa: B008
    """Render the home view.

    Args:
        request: The request object.
        service: The site service.

    Returns:
        The composed, translated page.
    """
    preferences = _preferences(request, service)
    context = service.context_for(preferences.get_language())
    page = await service.render(HOME_VIEW, context, preferences)
    return preferences.apply_to(HTMLResponse(page.html))


@router.get("/cases/{slug}", name="case", response_class=HTMLResponse)
async def case(request: Request, slug: str, service: SiteService = Depends(get_site_service)) -> Response:  # noqa: B008
    """Render a case view, or only its fragment for an HTMX swap.

    Args:
        request: The request object.
        slug: The case identifier.
        service: The site service.

    Returns:
        The full page, or the translated case fragment for HTMX requests.
    """
    preferences = _preferences(request, service)
    context = service.context_for(preferences.get_language())
    view = f"{CASE_VIEW_PREFIX}{slug}"
    service.get_view(view)

    if request.headers.get("HX-Request"):
        html = await service.render_fragment(f"{CASE_FRAGMENT_PREFIX}{slug}", context)
        return HTMLResponse(html)

    page = await service.render(view, context, preferences)
    return preferences.apply_to(HTMLResponse(page.html))


@router.get("/partials/{name}", name="partial", response_class=HTMLResponse)
async def partial(
    request: Request,
    name: str,
    service: SiteService = Depends(get_site_service),  # noqa: B008
) -> Response:
    """Render a single translated fragment.

    Args:
        request: The request object.
        name: The fragment name.
        service: The site service.

    Returns:
        The translated fragment markup.
    """
    preferences = _preferences(request, service)
    context = service.context_for(preferences.get_language())
    return HTMLResponse(await service.render_fragment(name, context))


@router.get("/language/{code}", name="language")
async def language(
    request: Request,
    code: str,
    next_url: str | None = Query(None, alias="next"),  # noqa: B008
    service: SiteService = Depends(get_site_service),  # noqa: B008
) -> Response:
    """Persist the selected language and go back to the page.

    An unsupported code leaves the stored language as it was.

    Args:
        request: The request object.
        code: The selected language code.
        next_url: A local path to return to.
        service: The site service.

    Returns:
        A redirect to `next_url`, or to the home view.
    """
    preferences = _preferences(request, service)
    if service.resolve_language(code) == code:
        preferences.set_language(code)
    else:
        service.logger.warning(f"Ignoring unsupported language '{code}'.")
    return preferences.apply_to(RedirectResponse(_safe_next(next_url), status_code=303))


@router.get("/navigate/{target}", name="navigate")
async def navigate(
    request: Request,
    target: str,
    view: str = Query(HOME_VIEW),  # noqa: B008
    service: SiteService = Depends(get_site_service),  # noqa: B008
) -> Response:
    """Resolve navigation to an anchor from the visitor's current view.

    Args:
        request: The request object.
        target: The id of the element to reach.
        view: The view the visitor is on.
        service: The site service.

    Returns:
        A JSON outcome. For a reload, the pending target is stored and the
        `HX-Redirect` header points at the home view.
    """
    preferences = _preferences(request, service)
    context = service.context_for(preferences.get_language())
    outcome = await service.navigate(view, target, context, preferences)
    response = JSONResponse({"action": str(outcome.action), "target": outcome.target, "reload": outcome.reload})
    if outcome.reload:
        response.headers["HX-Redirect"] = "/"
    return preferences.apply_to(response)
