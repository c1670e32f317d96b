from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from joti.core.database import get_db
from joti.services.page_store import PageStore

router = APIRouter()

@router.get("/z")
def healthz(db: Session = Depends(get_db)):
    # Check si l'API est up
    return {"status": "ok", "pages": PageStore(db).count()}
