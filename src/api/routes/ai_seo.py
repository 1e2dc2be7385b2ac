"""
POST /api/ai/generate-seo {pageTitle, siteName} → {metaTitle, metaDescription, focusKeywords, aiSeoScore}
Ne touche jamais au contenu de la page : le builder applique le résultat lui-même.
"""
import os
import logging

from fastapi import APIRouter, HTTPException, Request

from ...ai_seo import generate_seo_metadata
from ...models import SeoRequest

log = logging.getLogger(__name__)
router = APIRouter(prefix="/api/ai", tags=["AI"])


def _check_token(request: Request) -> str:
    token = (request.query_params.get("token")
             or request.cookies.get("admin_token", ""))
    if token != os.getenv("ADMIN_TOKEN", "changeme"):
        raise HTTPException(403, "Accès refusé")
    return token


@router.post("/generate-seo")
def api_generate_seo(body: SeoRequest, request: Request):
    _check_token(request)
    seo = generate_seo_metadata(body.page_title, body.site_name)
    return seo.model_dump(by_alias=True)
