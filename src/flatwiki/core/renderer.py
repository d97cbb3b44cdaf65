"""HTML rendering of wiki actions through Jinja2 templates."""

import logging
from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from markupsafe import Markup

logger = logging.getLogger(__name__)

BASE_TEMPLATE = "_base.html"

ACTIONS = ("home", "view", "new", "edit")


def trusted_filter(body: bytes | str | None) -> Markup:
    """Mark a page body as HTML that must not be escaped."""
    if body is None:
        return Markup("")
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    return Markup(body)


class Renderer:
    """Composes the base layout with one action template per response.

    Every action template extends ``_base.html``. The environment is owned
    by the instance; handlers get it from ``app.state``.
    """

    def __init__(
        self,
        templates_dir: Path,
        app_title: str = "FlatWiki",
        auto_reload: bool = True,
    ):
        self.templates_dir = Path(templates_dir)
        self.app_title = app_title
        self.templates = Jinja2Templates(directory=str(self.templates_dir))
        self.templates.env.auto_reload = auto_reload
        self.templates.env.filters["trusted"] = trusted_filter

    def template_name(self, action: str) -> str:
        return f"{action}.html"

    def check(self) -> None:
        """Load the base layout and every action template.

        Raises the Jinja2 error (TemplateNotFound, TemplateSyntaxError) for
        the first template that cannot be loaded.
        """
        env = self.templates.env
        env.get_template(BASE_TEMPLATE)
        for action in ACTIONS:
            env.get_template(self.template_name(action))
        logger.info("Loaded %d templates from %s", len(ACTIONS) + 1, self.templates_dir)

    def get_context(self, request: Request, **kwargs: Any) -> dict:
        """Create base context for templates."""
        return {
            "request": request,
            "app_title": self.app_title,
            "root_path": request.scope.get("root_path", ""),
            **kwargs,
        }

    def render(
        self, request: Request, action: str, status_code: int = 200, **kwargs: Any
    ) -> HTMLResponse:
        """Render ``action`` with the given context into a response."""
        return self.templates.TemplateResponse(
            request,
            self.template_name(action),
            self.get_context(request, **kwargs),
            status_code=status_code,
        )
