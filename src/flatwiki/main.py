"""FlatWiki FastAPI application."""

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI, Form, HTTPException, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from flatwiki.config import Settings
from flatwiki.core.errors import PageNotFoundError, WikiError
from flatwiki.core.models import Page
from flatwiki.core.renderer import Renderer
from flatwiki.core.storage import FileStorage, Storage
from flatwiki.core.titles import match_title, normalize_title
from flatwiki.error_handlers import register_error_handlers

logger = logging.getLogger(__name__)

router = APIRouter()


# ========== Dependencies ==========


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


def get_renderer(request: Request) -> Renderer:
    return request.app.state.renderer


def route_path(request: Request) -> str:
    """Request path relative to where the app is mounted."""
    path = request.scope["path"]
    root_path = request.scope.get("root_path", "")
    if root_path and path.startswith(root_path):
        return path[len(root_path) :]
    return path


def path_title(request: Request) -> str:
    """Validate the request path and return its page title.

    Anything that does not match the title-carrying route pattern is a
    404 before the handler runs.
    """
    title = match_title(route_path(request))
    if title is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    return title


def redirect(request: Request, url: str) -> RedirectResponse:
    """302 to ``url`` under the prefix the app is mounted at."""
    root_path = request.scope.get("root_path", "")
    return RedirectResponse(url=root_path + url, status_code=status.HTTP_302_FOUND)


# ========== Routes ==========


@router.get("/", response_class=HTMLResponse)
async def home(
    request: Request,
    storage: Storage = Depends(get_storage),
    renderer: Renderer = Depends(get_renderer),
):
    """Home page - list all pages."""
    pages: list[Page | None] = []
    for title in await storage.list_titles():
        try:
            pages.append(await storage.load(title))
        except WikiError:
            # Listed but unreadable; the template skips it.
            pages.append(None)
    return renderer.render(request, "home", pages=pages)


@router.get("/view/{title}", response_class=HTMLResponse)
async def view_page(
    request: Request,
    title: str = Depends(path_title),
    storage: Storage = Depends(get_storage),
    renderer: Renderer = Depends(get_renderer),
):
    """View a wiki page."""
    try:
        page = await storage.load(title)
    except PageNotFoundError:
        # Page doesn't exist - redirect to edit to create it
        return redirect(request, f"/edit/{title}")
    return renderer.render(request, "view", page=page)


@router.get("/edit/{title}", response_class=HTMLResponse)
async def edit_page(
    request: Request,
    title: str = Depends(path_title),
    storage: Storage = Depends(get_storage),
    renderer: Renderer = Depends(get_renderer),
):
    """Edit page form."""
    try:
        page = await storage.load(title)
        exists = True
    except PageNotFoundError:
        page = Page(title=title)
        exists = False
    return renderer.render(request, "edit", page=page, exists=exists)


@router.post("/save/{title}")
async def save_page(
    request: Request,
    title: str = Depends(path_title),
    body: str = Form(""),
    storage: Storage = Depends(get_storage),
):
    """Save page content."""
    title = normalize_title(title)
    await storage.save(Page(title=title, body=body.encode("utf-8")))
    return redirect(request, f"/view/{title}")


@router.get("/new", response_class=HTMLResponse)
async def new_page_form(
    request: Request,
    renderer: Renderer = Depends(get_renderer),
):
    """Blank creation form."""
    return renderer.render(request, "new")


@router.post("/new")
async def create_page(
    request: Request,
    title: str = Form(""),
    body: str = Form(""),
    storage: Storage = Depends(get_storage),
):
    """Create a page from the creation form. Existing pages are overwritten."""
    title = normalize_title(title)
    await storage.save(Page(title=title, body=body.encode("utf-8")))
    return redirect(request, f"/view/{title}")


@router.get("/delete/{title}")
async def delete_page(
    request: Request,
    title: str = Depends(path_title),
    storage: Storage = Depends(get_storage),
):
    """Delete a page."""
    await storage.delete(title)
    return redirect(request, "/")


# ========== Application factory ==========


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application with its own storage and renderer."""
    if settings is None:
        settings = Settings()

    storage = FileStorage(settings.pages_dir, create=True)
    renderer = Renderer(
        settings.templates_dir,
        app_title=settings.app_title,
        auto_reload=settings.reload_templates,
    )
    # Broken templates stop the process here, not on the first request.
    renderer.check()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Serving pages from %s", settings.pages_dir.resolve())
        yield
        logger.info("Shutting down")

    app = FastAPI(
        title=settings.app_title,
        debug=settings.debug,
        lifespan=lifespan,
        redirect_slashes=False,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.storage = storage
    app.state.renderer = renderer

    register_error_handlers(app)
    app.include_router(router)
    return app
