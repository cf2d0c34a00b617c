"""API route modules."""

from seasonteams.api.routes.health import router as health_router
from seasonteams.api.routes.home import router as home_router
from seasonteams.api.routes.teams import router as teams_router

__all__ = ["health_router", "home_router", "teams_router"]
