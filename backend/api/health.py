"""GET /api/health — database reachability check."""
import logging
from fastapi import APIRouter, Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
def health_check(request: Request):
    db_status = _check_database(request.app.state.engine)
    overall = "ok" if db_status["status"] == "up" else "degraded"
    return {
        "status": overall,
        "database": db_status,
    }


def _check_database(engine) -> dict:
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"status": "up", "url": engine.url.render_as_string(hide_password=True)}
    except SQLAlchemyError as e:
        logger.warning("Database health check failed: %s", e)
        return {"status": "down", "error": str(e)}
