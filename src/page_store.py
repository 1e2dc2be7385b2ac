"""
Persistance des snapshots du builder — implémente canvas_builder.PageStore sur SQLite.
"""
import logging

from sqlalchemy.exc import SQLAlchemyError

from canvas_builder import PageData

from .database import db_get_page, db_update_page, new_session, page_fields_from_data

log = logging.getLogger(__name__)


class SqlPageStore:
    """Écrit un PageData dans la table `pages` (dernier écrit gagne)."""

    def __init__(self, session_factory=new_session):
        self._session_factory = session_factory

    def save_page(self, page: PageData) -> bool:
        db = self._session_factory()
        try:
            row = db_get_page(db, page.id)
            if row is None:
                log.warning("save_page : page %s introuvable", page.id)
                return False
            db_update_page(db, row, **page_fields_from_data(page))
            log.info("Page %s enregistrée (%d éléments racine)", page.id, len(page.content.elements))
            return True
        except SQLAlchemyError as e:
            db.rollback()
            log.error("save_page %s : %s", page.id, e)
            return False
        finally:
            db.close()
