"""
CANVAS_BUILDER — FastAPI app
Démarrer : uvicorn src.api.main:app --reload --port 8001
"""
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from canvas_builder import __version__
from canvas_builder.router import router as canvas_router

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s — %(message)s")
log = logging.getLogger(__name__)

app = FastAPI(title="CANVAS_BUILDER — Éditeur de pages", version=__version__, docs_url="/docs")

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])


@app.on_event("startup")
def startup():
    from ..database import init_db
    init_db()
    log.info("DB initialisée (SQLite)")


@app.get("/health")
def health():
    return {"status": "ok", "service": "canvas_builder", "version": __version__}


# ── Routes ──
from .routes import ai_seo, live, pages

app.include_router(pages.router)
app.include_router(live.router)
app.include_router(ai_seo.router)
app.include_router(canvas_router)
