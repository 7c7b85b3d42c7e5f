import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(request: Request):
    """Проверка состояния сервиса и соединения с БД"""
    try:
        await request.app.state.database.ping()
    except SQLAlchemyError as exc:
        logger.error(f"Database health check failed: {exc}")
        return JSONResponse(status_code=503, content={"status": "unavailable", "database": "error"})
    return {"status": "ok", "database": "ok"}
