"""Home page."""

from fastapi import APIRouter
from fastapi.responses import RedirectResponse

router = APIRouter(tags=["home"])


@router.get("/", include_in_schema=False)
def home() -> RedirectResponse:
    """The home page is the team list."""
    return RedirectResponse("/teams", status_code=302)
