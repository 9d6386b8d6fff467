from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from sqlalchemy import text

from storefront.adapter.services.database import Database
from storefront.depends import get_database

router = APIRouter()


class HealthResponse(BaseModel):
    status: str
    database: str


@router.get("/health", status_code=status.HTTP_200_OK, response_model=HealthResponse)
async def health_check(database: Database = Depends(get_database)):
    """Service liveness plus a trivial query against the store"""
    try:
        async with database.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        db_status = "connected"
    except Exception:
        db_status = "disconnected"
    return HealthResponse(status="ok", database=db_status)
