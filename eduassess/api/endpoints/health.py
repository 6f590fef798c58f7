# eduassess/api/endpoints/health.py
from fastapi import APIRouter, Depends
from sqlalchemy import func, text
from sqlalchemy.orm import Session

from eduassess.db.deps import get_db
from eduassess.models.category import Category

router = APIRouter(tags=["health"])


@router.get("/live")
def liveness_probe():
    return {"status": "ok"}


@router.get("/db")
def db_health(db: Session = Depends(get_db)):
    """Database round-trip plus the number of categories recommendations can draw on."""
    db.execute(text("SELECT 1"))
    categories = db.query(func.count(Category.id)).scalar()
    return {"status": "ok", "categories": categories}
