import asyncio
from datetime import datetime

from joti.core.errors import Z
from joti.schemas.page import PageDraft
from joti.services.page_service import create_page
from joti.services.page_store import PageStore
from joti.services.sweeper import ExpirySweeper, run_sweep

LONG_AGO = datetime(2000, 1, 1)


def add_old_page(db, url):
    create_page(db, PageDraft(title=url, content="c", url=url, created_at=LONG_AGO, last_read_at=LONG_AGO))


def test_run_sweep(db):
    add_old_page(db, "vieux")
    create_page(db, PageDraft(title="neuf", content="c", url="neuf"))

    assert run_sweep(60) == 1
    assert run_sweep(60) == 0
    assert PageStore(db).get_by_url("neuf")[1] == Z.OK


def test_sweeper_background_task(db):
    add_old_page(db, "vieux")

    async def go():
        sweeper = ExpirySweeper(retention_days=60, interval=3600)
        sweeper.start()
        await asyncio.sleep(0.5)
        sweeper.stop()

    asyncio.run(go())
    assert PageStore(db).get_by_url("vieux")[1] == Z.NOT_FOUND
