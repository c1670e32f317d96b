"""
Service pages - création, édition, lecture (touch), expiration

Chaque opération renvoie (page, Z). Les cas attendus (NOT_FOUND,
URL_EXISTS, WRONG_EDITCODE) ne lèvent jamais d'exception.
"""

# IMPORTS
import logging
import os
import random
import re
from datetime import datetime, timedelta
from typing import Callable, Optional, Tuple

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from joti.core.clock import utcnow
from joti.core.database import Base
from joti.core.errors import Z
from joti.core.security import hash_editcode, verify_editcode
from joti.models.page import JotiPage
from joti.schemas.page import PageDraft
from joti.services.edit_words import EDIT_WORDS
from joti.services.page_store import PageStore
from joti.services.url_policy import auto_url, is_reserved, slugify

logger = logging.getLogger(__name__)

DESC_LEN = 200
_HEADING_RE = re.compile(r"^#+", re.MULTILINE)

# rng process-wide par défaut, les tests injectent random.Random(seed)
_rng = random.Random()

SEED_PAGE = {
    "title": "First Post!",
    "url": "firstpost",
    "content": "This is the first post.",
}


def random_editcode(rng=None) -> str:
    return (rng or _rng).choice(EDIT_WORDS)


def content_to_desc(content: str) -> str:
    # 200 premiers caractères, sans les "###" de titres markdown
    desc = content[:DESC_LEN]
    return _HEADING_RE.sub("", desc)


def _url_taken(store: PageStore, url: str, excluding_id: int = 0) -> bool:
    return is_reserved(url) or store.url_exists(url, excluding_id)


# func 1: create_page()
def create_page(
    db: Session,
    draft: PageDraft,
    now: Callable[[], datetime] = utcnow,
    rng: Optional[random.Random] = None,
) -> Tuple[Optional[JotiPage], Z, str]:
    """
    Crée une page depuis un draft.

    Retourne (page, Z, editcode). editcode est le code en clair,
    à montrer une seule fois à l'utilisateur.
    """
    store = PageStore(db)

    if draft.url and _url_taken(store, draft.url):
        return None, Z.URL_EXISTS, ""

    created_at = draft.created_at or now()
    last_read_at = draft.last_read_at or created_at
    if last_read_at < created_at:
        last_read_at = created_at
    editcode = draft.editcode or random_editcode(rng)

    page = JotiPage(
        title=draft.title,
        content=draft.content,
        description=content_to_desc(draft.content),
        author=draft.author,
        editcode=hash_editcode(editcode),
        created_at=created_at,
        last_read_at=last_read_at,
    )

    if draft.url:
        page.url = draft.url
        page_id, z = store.insert(page)
    else:
        # url auto = slug + id, l'id n'est connu qu'après l'insert
        base = slugify(draft.title)
        page_id, z = store.insert_with_auto_url(page, lambda new_id: auto_url(base, new_id))
    if z != Z.OK:
        return None, z, ""

    # relire pour avoir l'url finale
    page, z = store.get_by_id(page_id)
    if z != Z.OK:
        return None, z, ""

    logger.info(f"Created page {page.id} at /{page.url}")
    return page, Z.OK, editcode


# func 2: edit_page()
def edit_page(
    db: Session,
    page_id: int,
    draft: PageDraft,
    editcode: str,
    now: Callable[[], datetime] = utcnow,
) -> Tuple[Optional[JotiPage], Z]:
    """
    Modifie une page existante si editcode correspond.

    Le code est vérifié avant tout le reste, une page avec un mauvais
    code n'est jamais modifiée.
    """
    store = PageStore(db)

    page, z = store.get_by_id(page_id)
    if z != Z.OK:
        return None, z

    if not verify_editcode(editcode, page.editcode):
        logger.info(f"Wrong edit code for page {page_id}")
        return None, Z.WRONG_EDITCODE

    if draft.url and _url_taken(store, draft.url, page.id):
        return None, Z.URL_EXISTS

    current = now()
    if page.created_at is None:
        page.created_at = current
    # last_read_at ne recule jamais
    page.last_read_at = max(current, page.last_read_at or current, page.created_at)

    page.title = draft.title
    page.content = draft.content
    page.description = content_to_desc(draft.content)
    page.author = draft.author
    page.url = draft.url or auto_url(slugify(draft.title), page.id)
    if draft.editcode:
        page.editcode = hash_editcode(draft.editcode)

    z = store.update(page)
    if z != Z.OK:
        return None, z

    logger.info(f"Edited page {page.id} at /{page.url}")
    return page, Z.OK


def edit_page_by_url(
    db: Session,
    url: str,
    draft: PageDraft,
    editcode: str,
    now: Callable[[], datetime] = utcnow,
) -> Tuple[Optional[JotiPage], Z]:
    page, z = PageStore(db).get_by_url(url)
    if z != Z.OK:
        return None, z
    return edit_page(db, page.id, draft, editcode, now=now)


# func 3: read_touch()
def read_touch(
    db: Session,
    url: str,
    now: Callable[[], datetime] = utcnow,
) -> Tuple[Optional[JotiPage], Z]:
    """Lit une page par url et met à jour last_read_at (best effort)"""
    store = PageStore(db)

    page, z = store.get_by_url(url)
    if z != Z.OK:
        return None, z

    # détachée: le commit du touch ne doit pas expirer la page lue
    db.expunge(page)

    timestamp = max(now(), page.created_at)
    touch_z = store.touch_last_accessed(url, timestamp)
    if touch_z == Z.OK:
        page.last_read_at = timestamp
    else:
        # jamais remonté au lecteur
        logger.warning(f"read_touch: could not touch /{url} ({touch_z.message})")

    return page, Z.OK


# func 4: expiry_sweep()
def expiry_sweep(
    db: Session,
    retention: timedelta,
    now: Callable[[], datetime] = utcnow,
) -> int:
    """Supprime les pages non lues depuis `retention`, retourne le nombre supprimé"""
    cutoff = now() - retention
    logger.info(f"Deleting jotipages older than {cutoff.isoformat()}")

    count, z = PageStore(db).delete_before(cutoff)
    if z != Z.OK:
        logger.error(f"expiry_sweep aborted ({z.message})")
        return 0

    logger.info(f"Deleted {count} jotipage(s)")
    return count


# func 5: initialize_store()
def initialize_store(path: str) -> Z:
    """
    Crée une base SQLite neuve à `path` avec une page exemple.

    Échoue (Z.EXISTS) si quelque chose existe déjà à cet endroit.
    La page exemple n'a pas de code d'édition (hash vide): verify_editcode
    refuse tout code, y compris "", donc elle n'est pas modifiable.
    """
    if os.path.exists(path):
        logger.error(f"initialize_store: '{path}' exists")
        return Z.EXISTS

    engine = create_engine(f"sqlite:///{path}")
    try:
        Base.metadata.create_all(bind=engine)
        with Session(engine) as db:
            now = utcnow()
            db.add(JotiPage(
                title=SEED_PAGE["title"],
                url=SEED_PAGE["url"],
                content=SEED_PAGE["content"],
                description=content_to_desc(SEED_PAGE["content"]),
                # pas de code: la page exemple n'est pas modifiable
                editcode="",
                created_at=now,
                last_read_at=now,
            ))
            db.commit()
    except SQLAlchemyError as e:
        logger.error(f"initialize_store: {e}")
        return Z.DBERR
    finally:
        engine.dispose()

    logger.info(f"Initialized store at '{path}'")
    return Z.OK
