"""
GET /live/{site_slug}/{page_slug} — page publique rendue en mode live
"""
import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from canvas_builder import render_page

from ...database import db_get_page_by_slug, db_get_site_by_slug, get_db, page_to_data

log = logging.getLogger(__name__)
router = APIRouter(tags=["Live"])


@router.get("/live/{site_slug}/{page_slug}", response_class=HTMLResponse)
def live_page(site_slug: str, page_slug: str, db: Session = Depends(get_db)):
    site = db_get_site_by_slug(db, site_slug)
    if not site:
        raise HTTPException(404, "Site introuvable")
    page = db_get_page_by_slug(db, site.site_id, page_slug)
    if not page:
        raise HTTPException(404, "Page introuvable")

    data = page_to_data(page)
    log.info("Live %s/%s (%d éléments racine)", site_slug, page_slug, len(data.content.elements))
    return HTMLResponse(render_page(
        data.content,
        title=data.meta_title or data.title,
        description=data.meta_description,
        keywords=data.focus_keywords,
    ))
