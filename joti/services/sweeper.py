"""
Tâche de fond: supprime régulièrement les pages expirées

Démarrée dans le lifespan FastAPI, tourne toutes les
SWEEP_INTERVAL_SECONDS secondes.
"""

import asyncio
import logging
from datetime import timedelta

from joti.core import database
from joti.services.page_service import expiry_sweep

logger = logging.getLogger(__name__)


def run_sweep(retention_days: int) -> int:
    db = database.SessionLocal()
    try:
        return expiry_sweep(db, timedelta(days=retention_days))
    finally:
        db.close()


class ExpirySweeper:
    def __init__(self, retention_days: int, interval: float) -> None:
        self.retention_days = retention_days
        self.interval = interval
        self._task: asyncio.Task | None = None
        self._running: bool = False

    def start(self) -> None:
        if self._task is not None:
            return
        self._running = True
        self._task = asyncio.create_task(self._loop())

    def stop(self) -> None:
        self._running = False
        if self._task is not None:
            self._task.cancel()
            self._task = None

    async def _loop(self) -> None:
        while self._running:
            try:
                # DB sync -> thread pour ne pas bloquer la boucle
                await asyncio.to_thread(run_sweep, self.retention_days)
            except asyncio.CancelledError:
                break
            except Exception:
                logger.exception("Error running expiry sweep")
            await asyncio.sleep(self.interval)
