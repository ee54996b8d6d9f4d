"""Liveness and readiness probes."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text

from jobly import db as database

router = APIRouter(prefix="/health", tags=["health"])


def _check_database() -> dict:
    session = database.SessionLocal()
    try:
        session.execute(text("SELECT 1"))
    except Exception as exc:
        return {"status": "unhealthy", "error": str(exc)}
    finally:
        session.close()
    return {"status": "healthy"}


@router.get("")
@router.get("/live")
async def live() -> dict:
    """The process is up and serving requests."""
    return {"status": "healthy"}


@router.get("/ready")
def ready():
    """200 when the database answers ``SELECT 1``, 503 otherwise."""
    dependencies = {"database": _check_database()}
    healthy = all(dep["status"] == "healthy" for dep in dependencies.values())
    body = {"status": "healthy" if healthy else "unhealthy", "dependencies": dependencies}
    if healthy:
        return body
    return JSONResponse(status_code=503, content=body)
