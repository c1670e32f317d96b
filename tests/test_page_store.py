"""
Tests du store: unicité des urls, touch, delete_before
"""

import logging
from datetime import datetime, timedelta

from joti.core.errors import Z
from joti.models.page import JotiPage
from joti.services.page_store import PageStore

T0 = datetime(2024, 1, 1, 8, 0, 0)


def make_page(url="", title="Titre", last_read_at=T0):
    return JotiPage(
        title=title,
        url=url,
        content="contenu",
        description="contenu",
        editcode="",
        created_at=T0,
        last_read_at=last_read_at,
    )


# ========== INSERT / GET ==========

def test_insert_and_get(db):
    store = PageStore(db)
    page_id, z = store.insert(make_page(url="abc"))
    assert z == Z.OK

    page, z = store.get_by_id(page_id)
    assert z == Z.OK
    assert page.url == "abc"

    page, z = store.get_by_url("abc")
    assert z == Z.OK
    assert page.id == page_id


def test_get_not_found(db):
    store = PageStore(db)
    assert store.get_by_id(999) == (None, Z.NOT_FOUND)
    assert store.get_by_url("nope") == (None, Z.NOT_FOUND)


def test_insert_duplicate_url(db):
    """La contrainte UNIQUE de la DB est le vrai garde-fou"""
    store = PageStore(db)
    store.insert(make_page(url="dup"))
    page_id, z = store.insert(make_page(url="dup"))
    assert page_id is None
    assert z == Z.URL_EXISTS
    assert store.count() == 1


def test_ids_increase_and_are_not_reused(db):
    store = PageStore(db)
    id1, _ = store.insert(make_page(url="a"))
    id2, _ = store.insert(make_page(url="b"))
    assert id2 > id1

    store.delete_before(T0 + timedelta(days=1))
    id3, _ = store.insert(make_page(url="c"))
    assert id3 > id2


def test_insert_with_auto_url(db):
    store = PageStore(db)
    page_id, z = store.insert_with_auto_url(make_page(), lambda i: f"slug{i}")
    assert z == Z.OK
    page, _ = store.get_by_id(page_id)
    assert page.url == f"slug{page_id}"


def test_insert_with_auto_url_collision_adds_suffix(db):
    store = PageStore(db)
    # la page 3 voudrait note2, note2 et note2_1 sont déjà prises
    store.insert(make_page(url="note2"))
    store.insert(make_page(url="note2_1"))
    page_id, z = store.insert_with_auto_url(make_page(), lambda i: f"note{i - 1}")
    assert z == Z.OK
    page, _ = store.get_by_id(page_id)
    assert page.url == "note2_2"
    assert store.count() == 3


# ========== URL EXISTS / UPDATE ==========

def test_url_exists_excluding(db):
    store = PageStore(db)
    page_id, _ = store.insert(make_page(url="mine"))
    assert store.url_exists("mine")
    assert not store.url_exists("mine", excluding_id=page_id)
    assert not store.url_exists("other")


def test_update_collision(db):
    store = PageStore(db)
    store.insert(make_page(url="first"))
    second_id, _ = store.insert(make_page(url="second"))

    page, _ = store.get_by_id(second_id)
    page.url = "first"
    assert store.update(page) == Z.URL_EXISTS

    # rollback: la page garde son url
    page, _ = store.get_by_id(second_id)
    assert page.url == "second"


# ========== TOUCH ==========

def test_touch_last_accessed(db):
    store = PageStore(db)
    store.insert(make_page(url="t"))
    later = T0 + timedelta(hours=3)
    assert store.touch_last_accessed("t", later) == Z.OK

    db.expire_all()
    page, _ = store.get_by_url("t")
    assert page.last_read_at == later


def test_touch_not_found(db):
    assert PageStore(db).touch_last_accessed("nope", T0) == Z.NOT_FOUND


# ========== DELETE BEFORE ==========

def test_delete_before(db, caplog):
    store = PageStore(db)
    store.insert(make_page(url="old", title="Vieille page", last_read_at=T0))
    store.insert(make_page(url="new", last_read_at=T0 + timedelta(days=10)))

    caplog.set_level(logging.INFO, logger="joti.services.page_store")
    count, z = store.delete_before(T0 + timedelta(days=1))

    assert z == Z.OK
    assert count == 1
    assert store.get_by_url("old")[1] == Z.NOT_FOUND
    assert store.get_by_url("new")[1] == Z.OK
    # chaque page supprimée est loggée avant
    assert "Vieille page" in caplog.text


def test_delete_before_cutoff_is_strict(db):
    store = PageStore(db)
    store.insert(make_page(url="edge", last_read_at=T0))
    count, _ = store.delete_before(T0)
    assert count == 0
