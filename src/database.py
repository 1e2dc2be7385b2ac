"""SQLite — init + session + CRUD helpers"""
import json, logging, os
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from canvas_builder import PageData, dump_document, parse_document

from .models import Base, PageDB, SiteDB

log = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent.parent / "data"

DB_PATH      = os.getenv("DB_PATH", str(DATA_DIR / "canvas_builder.db"))
ENGINE       = create_engine(f"sqlite:///{DB_PATH}", connect_args={"check_same_thread": False})
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=ENGINE)


def init_db(db_path: Optional[str] = None):
    """Crée les tables. Relit DB_PATH pour suivre la config du process (tests : tmp_path)."""
    global DB_PATH, ENGINE
    path = db_path or os.getenv("DB_PATH", str(DATA_DIR / "canvas_builder.db"))
    if path != DB_PATH:
        ENGINE.dispose()
        DB_PATH = path
        ENGINE  = create_engine(f"sqlite:///{DB_PATH}", connect_args={"check_same_thread": False})
        SessionLocal.configure(bind=ENGINE)
    Path(DB_PATH).parent.mkdir(parents=True, exist_ok=True)
    Base.metadata.create_all(bind=ENGINE)
    log.info("DB prête : %s", DB_PATH)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ── JSON helpers ──
def jl(s: Optional[str]) -> list:
    try: return json.loads(s or "[]")
    except ValueError: return []

def jd(o) -> str:
    return json.dumps(o, ensure_ascii=False)


# ── Site ──
def db_create_site(db: Session, obj: SiteDB) -> SiteDB:
    db.add(obj); db.commit(); db.refresh(obj); return obj

def db_get_site(db: Session, site_id: str) -> Optional[SiteDB]:
    return db.query(SiteDB).filter_by(site_id=site_id).first()

def db_get_site_by_slug(db: Session, slug: str) -> Optional[SiteDB]:
    return db.query(SiteDB).filter_by(slug=slug).first()


# ── Page ──
def db_create_page(db: Session, obj: PageDB) -> PageDB:
    db.add(obj); db.commit(); db.refresh(obj); return obj

def db_get_page(db: Session, page_id: str) -> Optional[PageDB]:
    return db.query(PageDB).filter_by(page_id=page_id).first()

def db_get_page_by_slug(db: Session, site_id: str, slug: str) -> Optional[PageDB]:
    return db.query(PageDB).filter_by(site_id=site_id, slug=slug).first()

def db_list_pages(db: Session, site_id: str) -> List[PageDB]:
    return db.query(PageDB).filter_by(site_id=site_id).order_by(PageDB.created_at).all()

def db_update_page(db: Session, page: PageDB, **kwargs) -> PageDB:
    for k, v in kwargs.items():
        setattr(page, k, v)
    page.updated_at = datetime.utcnow()
    db.commit(); db.refresh(page); return page


def db_ensure_home_page(db: Session, site: SiteDB) -> List[PageDB]:
    """Pages du site ; une page « Home » vide est créée si le site n'en a aucune."""
    pages = db_list_pages(db, site.site_id)
    if pages:
        return pages
    home = db_create_page(db, PageDB(
        site_id=site.site_id, title="Home", slug="home", content=jd({"elements": []}),
    ))
    log.info("Page Home créée pour le site %s", site.slug)
    return [home]


# ── Conversion ORM ↔ builder ──
def page_to_data(page: PageDB) -> PageData:
    """Ligne `pages` → PageData (contenu absent ou vide → {"elements": []})."""
    content = parse_document(json.loads(page.content) if page.content else None)
    return PageData(
        id=page.page_id,
        site_id=page.site_id,
        title=page.title,
        slug=page.slug,
        status=page.status,
        ai_seo_score=page.ai_seo_score or 0,
        meta_title=page.meta_title,
        meta_description=page.meta_description,
        focus_keywords=jl(page.focus_keywords),
        content=content,
    )


def page_fields_from_data(data: PageData) -> dict:
    """PageData → colonnes de `pages` (inverse de page_to_data)."""
    return {
        "title":            data.title,
        "slug":             data.slug,
        "status":           data.status,
        "meta_title":       data.meta_title,
        "meta_description": data.meta_description,
        "focus_keywords":   jd(data.focus_keywords),
        "ai_seo_score":     data.ai_seo_score,
        "content":          jd(dump_document(data.content)),
    }


def new_session() -> Session:
    """Session indépendante (hors requête HTTP)."""
    return SessionLocal()
