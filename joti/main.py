from contextlib import asynccontextmanager
from fastapi import FastAPI
from joti.core import database
from joti.core.config import settings
from joti.core.database import Base
from joti.routers import health, pages, site
from joti.services.sweeper import ExpirySweeper

# Init DB
Base.metadata.create_all(bind=database.engine)

sweeper = ExpirySweeper(settings.RETENTION_DAYS, settings.SWEEP_INTERVAL_SECONDS)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Sweep des pages expirées en tâche de fond
    sweeper.start()
    yield
    sweeper.stop()


app = FastAPI(
    title="joti",
    version="0.1.0",
    lifespan=lifespan
)

# Routes (site en dernier: /{url} attrape tout)
app.include_router(health.router, prefix="/health")
app.include_router(pages.router)
app.include_router(site.router)
