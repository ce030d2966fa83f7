# backend/beautyshop/api/v1/endpoints/health.py
"""
Sondas de salud para el orquestador de contenedores.

- GET /health: el proceso está vivo (liveness)
- GET /health/ready: además, la base de datos responde (readiness)
"""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from beautyshop.core.config import settings

router = APIRouter()

@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Liveness: responde 200 mientras el proceso esté levantado."""
    return {"status": "healthy", "service": settings.PROJECT_NAME, "version": settings.PROJECT_VERSION}


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness: 503 si no hay gestor de base de datos o no responde."""
    manager = getattr(request.app.state, "db_manager", None)
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
