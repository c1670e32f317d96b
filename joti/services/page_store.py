"""
Store des pages - accès DB, unicité des urls, persistance

Toutes les méthodes renvoient un code Z, jamais d'exception pour les
cas attendus. Les erreurs SQLAlchemy sont loggées puis -> Z.DBERR.
"""

import logging
import uuid
from datetime import datetime
from typing import Callable, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from joti.core.errors import Z
from joti.models.page import JotiPage

logger = logging.getLogger(__name__)


def _is_url_violation(e: IntegrityError) -> bool:
    # sqlite: "UNIQUE constraint failed: jotipage.url"
    # postgres: "... violates unique constraint ..._url_key"
    msg = str(e.orig).lower()
    return "url" in msg and "unique" in msg


class PageStore:
    def __init__(self, db: Session):
        self.db = db

    def _fail(self, op: str, e: Exception) -> Z:
        self.db.rollback()
        logger.error(f"{op}: {e}")
        return Z.DBERR

    def _write_failed(self, op: str, e: SQLAlchemyError) -> Z:
        if isinstance(e, IntegrityError) and _is_url_violation(e):
            self.db.rollback()
            logger.info(f"{op}: url already taken")
            return Z.URL_EXISTS
        return self._fail(op, e)

    # func 1: get_by_id()
    def get_by_id(self, page_id: int) -> Tuple[Optional[JotiPage], Z]:
        try:
            page = self.db.query(JotiPage).filter(JotiPage.id == page_id).first()
        except SQLAlchemyError as e:
            return None, self._fail("get_by_id", e)
        if not page:
            return None, Z.NOT_FOUND
        return page, Z.OK

    # func 2: get_by_url()
    def get_by_url(self, url: str) -> Tuple[Optional[JotiPage], Z]:
        try:
            page = self.db.query(JotiPage).filter(JotiPage.url == url).first()
        except SQLAlchemyError as e:
            return None, self._fail("get_by_url", e)
        if not page:
            return None, Z.NOT_FOUND
        return page, Z.OK

    # func 3: url_exists()
    def url_exists(self, url: str, excluding_id: int = 0) -> bool:
        """True si une autre page (id != excluding_id) a déjà cette url"""
        try:
            found = self.db.query(JotiPage.id).filter(
                JotiPage.url == url,
                JotiPage.id != excluding_id
            ).first()
        except SQLAlchemyError as e:
            self._fail("url_exists", e)
            # la contrainte UNIQUE tranchera au moment du write
            return False
        return found is not None

    # func 4: insert()
    def insert(self, page: JotiPage) -> Tuple[Optional[int], Z]:
        try:
            self.db.add(page)
            self.db.commit()
            self.db.refresh(page)
        except SQLAlchemyError as e:
            return None, self._write_failed("insert", e)
        return page.id, Z.OK

    # func 5: insert_with_auto_url()
    def insert_with_auto_url(self, page: JotiPage, make_url: Callable[[int], str]) -> Tuple[Optional[int], Z]:
        """
        Insert quand l'url dépend de l'id.

        Placeholder unique -> flush (la DB donne l'id) -> url finale -> un seul commit.
        Si slug+id est déjà pris (url custom), on garde l'id et on ajoute _1, _2...
        """
        try:
            page.url = f"_pending_{uuid.uuid4().hex}"
            self.db.add(page)
            self.db.flush()
            base = make_url(page.id)
            url = base
            n = 0
            while self.db.query(JotiPage.id).filter(JotiPage.url == url).first() is not None:
                n += 1
                url = f"{base}_{n}"
            page.url = url
            self.db.commit()
            self.db.refresh(page)
        except SQLAlchemyError as e:
            return None, self._write_failed("insert_with_auto_url", e)
        return page.id, Z.OK

    # func 6: update()
    def update(self, page: JotiPage) -> Z:
        try:
            self.db.add(page)
            self.db.commit()
            self.db.refresh(page)
        except SQLAlchemyError as e:
            return self._write_failed("update", e)
        return Z.OK

    # func 7: touch_last_accessed()
    def touch_last_accessed(self, url: str, timestamp: datetime) -> Z:
        try:
            n = self.db.query(JotiPage).filter(JotiPage.url == url).update(
                {JotiPage.last_read_at: timestamp},
                synchronize_session=False
            )
            self.db.commit()
        except SQLAlchemyError as e:
            return self._fail("touch_last_accessed", e)
        if n == 0:
            return Z.NOT_FOUND
        return Z.OK

    # func 8: delete_before()
    def delete_before(self, cutoff: datetime) -> Tuple[int, Z]:
        """Supprime les pages avec last_read_at < cutoff, log chaque page avant"""
        try:
            expired = self.db.query(JotiPage.id, JotiPage.title, JotiPage.last_read_at).filter(
                JotiPage.last_read_at < cutoff
            ).all()
            for page_id, title, last_read_at in expired:
                logger.info(f"***  {last_read_at.isoformat()} {page_id} {title}")

            count = self.db.query(JotiPage).filter(
                JotiPage.last_read_at < cutoff
            ).delete(synchronize_session=False)
            self.db.commit()
        except SQLAlchemyError as e:
            return 0, self._fail("delete_before", e)
        return count, Z.OK

    def count(self) -> int:
        return self.db.query(func.count(JotiPage.id)).scalar() or 0
