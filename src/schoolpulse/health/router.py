"""Health, readiness, and version endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from schoolpulse.config import get_settings
from schoolpulse.storage import get_storage
from schoolpulse.storage.base import Storage

router = APIRouter()


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe: returns 200 if the process is alive."""
    return {"status": "healthy"}


@router.get("/api/health")
async def api_health() -> dict[str, str]:
    """Liveness probe for the UI, with server time."""
    return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}


@router.get("/ready")
async def readiness(
    storage: Storage = Depends(get_storage),  # noqa: B008
) -> dict[str, object]:
    """Readiness probe: checks the store is reachable."""
    checks: dict[str, object] = {}
    try:
        checks["storage"] = "ok" if await storage.ping() else "error: ping failed"
    except Exception as exc:
        checks["storage"] = f"error: {exc}"

    all_ok = all(v == "ok" for v in checks.values())
    return {"status": "ready" if all_ok else "degraded", "checks": checks}


@router.get("/version")
async def version() -> dict[str, str]:
    """Return API version and environment."""
    settings = get_settings()
    return {
        "version": settings.app_version,
        "environment": settings.environment,
    }
