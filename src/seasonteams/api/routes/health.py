"""Liveness and readiness probes."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from seasonteams import get_logger
from seasonteams.api.dependencies import NowDep, SeasonDAODep, SettingsDep
from seasonteams.models import Season

logger = get_logger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health_check() -> dict:
    """The process is up."""
    return {"status": "healthy"}


@router.get("/ready", response_model=None)
def readiness_check(
    settings: SettingsDep, seasons: SeasonDAODep, now: NowDep
) -> dict | JSONResponse:
    """The database answers; reports the current season's phase.

    Does not create the season when it is missing.
    """
    name = Season.name_for(now.date())
    try:
        season = seasons.find_by_name(name)
    except Exception as e:
        logger.error("readiness_check_failed", error=str(e))
        return JSONResponse(
            {"status": "unavailable", "database": "unreachable"},
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    return {
        "status": "ready",
        "environment": settings.environment.value,
        "database": "connected",
        "season": name,
        "phase": season.phase(now).value if season else None,
    }
