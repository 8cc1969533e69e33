"""Health check endpoints."""
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
import logging

from ..core.database import health_check_db

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/health", tags=["Health"])


@router.get("")
async def health_check(request: Request):
    """Basic health check with a SELECT 1 round-trip"""
    if await health_check_db(request.app.state.engine):
        return {"success": True, "db": True}
    return JSONResponse(status_code=500, content={"success": False, "message": "DB not reachable"})
