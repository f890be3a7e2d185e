"""Health check endpoints"""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from taskapi.core.config import settings
from taskapi.db.database import get_db

router = APIRouter()


@router.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Health check endpoint, including a round trip to the database"""
    db.execute(text("SELECT 1"))
    return {"status": "healthy", "version": settings.VERSION, "database": "ok"}
