"""
Sites & pages du builder.
POST  /api/sites                      {name, slug}          → site + page Home
GET   /api/sites/{site_id}/pages                            → pages du site (builder)
POST  /api/sites/{site_id}/pages      {title, slug, status} → nouvelle page vide
GET   /api/pages/{page_id}                                  → page (contenu {"elements": []} si vide)
PATCH /api/pages/{page_id}            champs du builder     → sauvegarde
GET   /api/pages/{page_id}/canvas?selected=<id>             → canvas HTML (mode editable)
"""
import os
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from canvas_builder import PageData, RenderMode, dump_document, render_page

from ...database import (
    db_create_page, db_create_site, db_ensure_home_page, db_get_page, db_get_page_by_slug,
    db_get_site, db_get_site_by_slug, db_update_page, get_db, jd, page_to_data,
)
from ...models import PageCreate, PageDB, PageUpdate, SiteCreate, SiteDB

log = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Pages"])


def _check_token(request: Request) -> str:
    token = (request.query_params.get("token")
             or request.cookies.get("admin_token", ""))
    if token != os.getenv("ADMIN_TOKEN", "changeme"):
        raise HTTPException(403, "Accès refusé")
    return token


def _page_out(page: PageData) -> dict:
    data = page.model_dump(by_alias=True, exclude={"content"})
    data["content"] = dump_document(page.content)
    return data


# ── Sites ─────────────────────────────────────────────────────────────────────

@router.post("/sites")
def api_create_site(body: SiteCreate, request: Request, db: Session = Depends(get_db)):
    _check_token(request)
    if db_get_site_by_slug(db, body.slug):
        raise HTTPException(409, "Ce slug est déjà pris")
    site = db_create_site(db, SiteDB(name=body.name, slug=body.slug))
    pages = db_ensure_home_page(db, site)
    log.info("Site créé : %s (%s)", site.name, site.slug)
    return {
        "id":    site.site_id,
        "name":  site.name,
        "slug":  site.slug,
        "pages": [_page_out(page_to_data(p)) for p in pages],
    }


@router.get("/sites/{site_id}/pages")
def api_list_pages(site_id: str, request: Request, db: Session = Depends(get_db)):
    """Pages du site par ordre de création ; une page Home est provisionnée si aucune."""
    _check_token(request)
    site = db_get_site(db, site_id)
    if not site:
        raise HTTPException(404, "Site introuvable")
    pages = db_ensure_home_page(db, site)
    return {
        "site":  {"id": site.site_id, "name": site.name, "slug": site.slug},
        "pages": [_page_out(page_to_data(p)) for p in pages],
    }


@router.post("/sites/{site_id}/pages")
def api_create_page(site_id: str, body: PageCreate, request: Request, db: Session = Depends(get_db)):
    _check_token(request)
    if not db_get_site(db, site_id):
        raise HTTPException(404, "Site introuvable")
    if db_get_page_by_slug(db, site_id, body.slug):
        raise HTTPException(409, "Une page utilise déjà ce slug")
    page = db_create_page(db, PageDB(
        site_id=site_id, title=body.title, slug=body.slug, status=body.status,
        content=jd({"elements": []}),
    ))
    return _page_out(page_to_data(page))


# ── Pages ─────────────────────────────────────────────────────────────────────

@router.get("/pages/{page_id}")
def api_get_page(page_id: str, request: Request, db: Session = Depends(get_db)):
    _check_token(request)
    page = db_get_page(db, page_id)
    if not page:
        raise HTTPException(404, "Page introuvable")
    return _page_out(page_to_data(page))


@router.patch("/pages/{page_id}")
def api_update_page(page_id: str, body: PageUpdate, request: Request, db: Session = Depends(get_db)):
    """
    Sauvegarde du builder. Seuls les champs envoyés sont écrits ; `content`
    remplace l'arbre en bloc (pas de merge). Contenu mal formé → 422.
    """
    _check_token(request)
    page = db_get_page(db, page_id)
    if not page:
        raise HTTPException(404, "Page introuvable")

    fields = body.model_dump(exclude_unset=True, exclude={"content", "focus_keywords"})
    if body.focus_keywords is not None:
        fields["focus_keywords"] = jd(body.focus_keywords)
    if body.content is not None:
        fields["content"] = jd(dump_document(body.content))
    if fields.get("slug") and fields["slug"] != page.slug and db_get_page_by_slug(db, page.site_id, fields["slug"]):
        raise HTTPException(409, "Une page utilise déjà ce slug")

    page = db_update_page(db, page, **fields)
    log.info("Page %s mise à jour : %s", page_id, ", ".join(sorted(fields)) or "aucun champ")
    return _page_out(page_to_data(page))


@router.get("/pages/{page_id}/canvas", response_class=HTMLResponse)
def api_page_canvas(page_id: str, request: Request, selected: Optional[str] = None, db: Session = Depends(get_db)):
    """Canvas du builder : mêmes blocs que la page live + sélection, badges, zones de drop."""
    _check_token(request)
    page = db_get_page(db, page_id)
    if not page:
        raise HTTPException(404, "Page introuvable")
    data = page_to_data(page)
    return HTMLResponse(render_page(
        data.content, title=data.title, mode=RenderMode.EDITABLE, selected_id=selected,
    ))
