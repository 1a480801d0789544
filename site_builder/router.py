"""
Router FastAPI — endpoints site_builder.

GET  /site-builder/templates              → catalogue des templates
GET  /site-builder/templates/{id}         → schéma de champs + sections + défauts
GET  /site-builder/themes                 → catalogue des thèmes
GET  /site-builder/themes/{id}/css?mode=  → CSS compilé du thème (text/css)
POST /site-builder/render                 → HTMLResponse
POST /site-builder/edit                   → données modifiées (set / append / remove)
POST /site-builder/export                 → archive zip
"""
import base64
import binascii
import logging
from typing import Any, Dict, Literal, Optional

from fastapi import APIRouter, HTTPException, Query
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse, JSONResponse, Response
from pydantic import BaseModel, Field

from .core.errors import ConfigurationError, EditPathError, UnknownTemplateError
from .export import Asset, export_site, filename_from_field_path
from .export.assets import guess_extension
from .fields import (
    append_group_item,
    apply_edit,
    compute_defaults,
    group_by_section,
    remove_group_item,
    resolve_section_for,
)
from .renderer import render, render_pages
from .templates import get_template, list_templates
from .themes import compile_theme_css, get_theme, has_theme, list_themes, normalize_color_mode

log = logging.getLogger(__name__)

router = APIRouter(prefix="/site-builder", tags=["site_builder"])


# ── Modèles de requête ───────────────────────────────────────────────────────

class RenderRequest(BaseModel):
    template_id: str
    data: Dict[str, Any] = Field(default_factory=dict)
    theme_id: Optional[str] = None
    color_mode: Optional[str] = None


class EditRequest(BaseModel):
    data: Dict[str, Any] = Field(default_factory=dict)
    path: str
    value: Any = None
    op: Literal["set", "append", "remove"] = "set"
    template_id: Optional[str] = Field(None, description="schéma utilisé pour append/remove (min/max, item par défaut)")


class ExportAsset(BaseModel):
    data_base64: str
    filename: Optional[str] = None
    source: Optional[str] = None


class ExportRequest(RenderRequest):
    assets: Dict[str, ExportAsset] = Field(default_factory=dict)
    project_name: Optional[str] = None


def _not_found(e: UnknownTemplateError) -> HTTPException:
    return HTTPException(status_code=404, detail=str(e))


# ── Catalogues ───────────────────────────────────────────────────────────────

@router.get("/templates", summary="Liste les templates enregistrés")
def templates() -> JSONResponse:
    return JSONResponse({"templates": [t.model_dump() for t in list_templates()]})


@router.get("/templates/{template_id}", summary="Schéma de champs d'un template")
def template_detail(template_id: str) -> JSONResponse:
    try:
        template = get_template(template_id)
    except UnknownTemplateError as e:
        raise _not_found(e)
    return JSONResponse({
        "id": template.id,
        "name": template.name,
        "description": template.description,
        "category": template.category,
        "default_theme": template.default_theme,
        "pages": template.page_names,
        "fields": {
            key: {**field.model_dump(exclude_none=True), "section": resolve_section_for(key, field)}
            for key, field in template.fields.items()
        },
        "sections": group_by_section(template.fields),
        "defaults": compute_defaults(template.fields, template.default_theme),
    })


@router.get("/themes", summary="Liste les thèmes disponibles")
def themes() -> JSONResponse:
    return JSONResponse({"themes": [t.model_dump() for t in list_themes()]})


@router.get("/themes/{theme_id}/css", summary="CSS compilé d'un thème")
def theme_css(theme_id: str, mode: str = Query("light")) -> Response:
    if not has_theme(theme_id):
        raise HTTPException(status_code=404, detail=f"Thème inconnu : {theme_id!r}")
    css = compile_theme_css(get_theme(theme_id), normalize_color_mode(mode))
    return Response(content=css, media_type="text/css")


# ── Rendu / édition / export ────────────────────────────────────────────────

@router.post("/render", response_class=HTMLResponse, summary="Rend un template en HTML")
def render_endpoint(req: RenderRequest, page: Optional[str] = Query(None)) -> HTMLResponse:
    """Document complet ; `?page=about.html` pour une seule page d'un template multi-page."""
    try:
        if page:
            documents = render_pages(req.template_id, req.data, req.theme_id, req.color_mode)
            if page not in documents:
                raise HTTPException(status_code=404, detail=f"Page inconnue : {page!r}. Pages : {list(documents)}")
            return HTMLResponse(content=documents[page])
        return HTMLResponse(content=render(req.template_id, req.data, req.theme_id, req.color_mode))
    except UnknownTemplateError as e:
        raise _not_found(e)


@router.post("/edit", summary="Applique une édition par chemin")
def edit(req: EditRequest) -> dict:
    field = None
    if req.template_id:
        try:
            field = get_template(req.template_id).fields.get(req.path)
        except UnknownTemplateError as e:
            raise _not_found(e)
    try:
        if req.op == "append":
            data = append_group_item(req.data, req.path, req.value, field=field)
        elif req.op == "remove":
            if isinstance(req.value, bool) or not isinstance(req.value, int):
                raise HTTPException(status_code=400, detail="remove : `value` doit être l'index à retirer")
            data = remove_group_item(req.data, req.path, req.value, field=field)
        else:
            data = apply_edit(req.data, req.path, req.value)
    except EditPathError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"data": data}


def _decode_assets(assets: Dict[str, ExportAsset]) -> Dict[str, Asset]:
    decoded = {}
    for index, (key, item) in enumerate(sorted(assets.items())):
        try:
            data = base64.b64decode(item.data_base64, validate=True)
        except (binascii.Error, ValueError):
            raise HTTPException(status_code=400, detail=f"Asset {key!r} : base64 invalide")
        filename = item.filename or filename_from_field_path(key, index, guess_extension(data) or "jpg")
        decoded[key] = Asset(data=data, filename=filename, source=item.source)
    return decoded


@router.post("/export", summary="Exporte le site en archive zip")
async def export(req: ExportRequest) -> Response:
    assets = _decode_assets(req.assets)
    try:
        archive = await run_in_threadpool(
            export_site,
            req.template_id,
            req.data,
            req.theme_id,
            req.color_mode,
            assets,
            req.project_name,
        )
    except UnknownTemplateError as e:
        raise _not_found(e)
    except ConfigurationError as e:
        log.error("Export %s impossible : %s", req.template_id, e)
        raise HTTPException(status_code=422, detail=str(e))
    return Response(
        content=archive,
        media_type="application/zip",
        headers={"Content-Disposition": f'attachment; filename="{req.template_id}.zip"'},
    )
