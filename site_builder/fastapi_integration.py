"""
Helpers pour servir des sites rendus depuis une app FastAPI.
"""
from typing import Any, Callable, Mapping, Optional

from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from .renderer import render_pages
from .templates import INDEX_PAGE, get_template

DataFactory = Callable[[], Mapping[str, Any]]


def create_site_route(
    app: FastAPI,
    path: str,
    template_id: str,
    data_factory: DataFactory,
    theme_id: Optional[str] = None,
    color_mode: Optional[str] = None,
    page: str = INDEX_PAGE,
    **route_kwargs,
):
    """
    Crée une route FastAPI qui rend une page d'un template.

    Le template est résolu à la création de la route (id inconnu →
    UnknownTemplateError au démarrage, pas à la première requête) ; les
    données sont relues à chaque requête via data_factory.

    Example:
        >>> create_site_route(app, "/", "business-card", lambda: {"name": "Ada"})
    """
    template = get_template(template_id)
    if page not in template.page_names:
        raise ValueError(f"Page inconnue pour {template_id} : {page!r}. Pages : {template.page_names}")

    @app.get(path, response_class=HTMLResponse, **route_kwargs)
    def route():
        documents = render_pages(template_id, data_factory(), theme_id, color_mode)
        return HTMLResponse(documents[page])

    return route


class SiteRouter:
    """
    Monte toutes les pages d'un template sous un préfixe.

    Usage:
        >>> site = SiteRouter("small-business", load_customization, theme_id="elegant")
        >>> site.register(app, prefix="/demo")
        # /demo/ → index.html, /demo/about.html, /demo/contact.html
    """

    def __init__(
        self,
        template_id: str,
        data_factory: DataFactory,
        theme_id: Optional[str] = None,
        color_mode: Optional[str] = None,
    ):
        self.template = get_template(template_id)
        self.data_factory = data_factory
        self.theme_id = theme_id
        self.color_mode = color_mode

    def routes(self, prefix: str = "") -> dict[str, str]:
        """Chemin HTTP → nom de page."""
        prefix = prefix.rstrip("/")
        paths = {f"{prefix}/": INDEX_PAGE}
        for name in self.template.page_names:
            paths[f"{prefix}/{name}"] = name
        return paths

    def register(self, app: FastAPI, prefix: str = ""):
        for path, page in self.routes(prefix).items():
            create_site_route(
                app, path, self.template.id, self.data_factory,
                theme_id=self.theme_id, color_mode=self.color_mode, page=page,
            )
