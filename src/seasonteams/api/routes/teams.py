"""Team endpoints.

Listing and viewing are open to everyone. New and create need a signed-in
user; edit, update and destroy need the user to be a member of the team (or
an admin). Every endpoint answers with an HTML page or a JSON payload
depending on the request's response format.
"""

from fastapi import APIRouter, HTTPException, Query, Request, Response, status
from fastapi.responses import JSONResponse, RedirectResponse

from seasonteams import get_logger
from seasonteams.api.auth import CurrentUser, OptionalUser
from seasonteams.api.dependencies import CurrentSeasonDep, NowDep, SettingsDep, TeamServiceDep
from seasonteams.api.formats import ResponseFormat, ResponseFormatDep
from seasonteams.api.payloads import TeamPayloadDep
from seasonteams.api.templates import templates
from seasonteams.config import Settings
from seasonteams.models import Team, User
from seasonteams.services.listing import DISPLAY_ROLES, display_roles
from seasonteams.services.permissions import TeamAction, can
from seasonteams.services.team_schemas import TeamValidationError
from seasonteams.services.team_service import TeamService

logger = get_logger(__name__)

router = APIRouter(prefix="/teams", tags=["teams"])


# =============================================================================
# HELPERS
# =============================================================================


def _team_json(team: Team) -> dict:
    return team.model_dump(mode="json", exclude={"activities"})


def _render(
    request: Request,
    name: str,
    context: dict,
    status_code: int = status.HTTP_200_OK,
) -> Response:
    return templates.TemplateResponse(request, name, context, status_code=status_code)


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=status.HTTP_302_FOUND)


def _load_team(team_id: str, service: TeamService) -> Team:
    team = service.get_team(team_id)
    if team is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Team not found")
    return team


def _denied(fmt: ResponseFormat, settings: Settings) -> Response:
    """Answer for a request the user is not allowed to make."""
    if fmt == ResponseFormat.JSON:
        return JSONResponse(
            {"detail": "You are not authorized to access this page."},
            status_code=status.HTTP_403_FORBIDDEN,
        )
    return _redirect(settings.home_path)


def _authorize(user: User, action: TeamAction, team: Team) -> bool:
    if can(user, action, team):
        return True
    logger.warning(
        "team_access_denied",
        action=action.value,
        team_id=team.id,
        user_id=user.id,
    )
    return False


def _unexpected(operation: str, error: Exception, **context) -> HTTPException:
    logger.error(f"team_{operation}_error", error=str(error), **context)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {operation} team",
    )


# =============================================================================
# READ - List (open)
# =============================================================================


@router.get("", response_model=None)
def list_teams(
    request: Request,
    fmt: ResponseFormatDep,
    season: CurrentSeasonDep,
    service: TeamServiceDep,
    now: NowDep,
    user: OptionalUser,
    sort: str | None = Query(None, description="Any value orders by activity"),
    direction: str | None = Query(None, description="'asc', anything else is descending"),
) -> Response:
    """Teams of the current season that are visible in its phase."""
    teams = service.list_teams(season, now, sort=sort, direction=direction)

    if fmt == ResponseFormat.JSON:
        return JSONResponse([_team_json(team) for team in teams])

    return _render(
        request,
        "teams/index.html",
        {
            "teams": teams,
            "season": season,
            "display_roles": display_roles(),
            "role_names": list(DISPLAY_ROLES),
            "current_user": user,
            "sort": sort,
            "direction": direction,
        },
    )


# =============================================================================
# NEW (signed-in users)
# =============================================================================


@router.get("/new", response_model=None)
def new_team(
    request: Request,
    user: CurrentUser,
    service: TeamServiceDep,
) -> Response:
    """Form for a new team, with the user prefilled as student."""
    return _render(
        request,
        "teams/new.html",
        {
            "team": service.build_new(user),
            "users": service.users_for_form(),
            "current_user": user,
            "errors": {},
        },
    )


# =============================================================================
# READ - Show (open)
# =============================================================================


@router.get("/{team_id}", response_model=None)
def show_team(
    team_id: str,
    request: Request,
    fmt: ResponseFormatDep,
    service: TeamServiceDep,
    user: OptionalUser,
) -> Response:
    """A single team."""
    team = _load_team(team_id, service)

    if fmt == ResponseFormat.JSON:
        return JSONResponse(_team_json(team))

    return _render(
        request,
        "teams/show.html",
        {
            "team": team,
            "current_user": user,
            "can_edit": can(user, TeamAction.EDIT, team),
        },
    )


# =============================================================================
# EDIT (team members)
# =============================================================================


@router.get("/{team_id}/edit", response_model=None)
def edit_team(
    team_id: str,
    request: Request,
    user: CurrentUser,
    fmt: ResponseFormatDep,
    settings: SettingsDep,
    service: TeamServiceDep,
) -> Response:
    """Edit form for a team the user belongs to."""
    team = _load_team(team_id, service)
    if not _authorize(user, TeamAction.EDIT, team):
        return _denied(fmt, settings)

    return _render(
        request,
        "teams/edit.html",
        {
            "team": service.prepare_edit(team),
            "users": service.users_for_form(),
            "current_user": user,
            "errors": {},
        },
    )


# =============================================================================
# CREATE (signed-in users)
# =============================================================================


@router.post("", response_model=None)
def create_team(
    data: TeamPayloadDep,
    request: Request,
    user: CurrentUser,
    fmt: ResponseFormatDep,
    season: CurrentSeasonDep,
    service: TeamServiceDep,
) -> Response:
    """Create a team in the current season."""
    try:
        team = service.create(data, season)
    except TeamValidationError as e:
        logger.warning("team_create_validation_failed", errors=e.errors)
        if fmt == ResponseFormat.JSON:
            return JSONResponse(e.errors, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
        return _render(
            request,
            "teams/new.html",
            {
                "team": service.preview(Team(), data),
                "users": service.users_for_form(),
                "current_user": user,
                "errors": e.errors,
            },
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )
    except Exception as e:
        raise _unexpected("create", e, season=season.name) from e

    logger.info(
        "team_created",
        team_id=team.id,
        team_name=team.name,
        season=season.name,
        user_id=user.id,
    )

    location = f"{router.prefix}/{team.id}"
    if fmt == ResponseFormat.JSON:
        return JSONResponse(
            _team_json(team),
            status_code=status.HTTP_201_CREATED,
            headers={"Location": location},
        )
    return _redirect(location)


# =============================================================================
# UPDATE (team members)
# =============================================================================


@router.api_route("/{team_id}", methods=["PUT", "PATCH", "POST"], response_model=None)
def update_team(
    team_id: str,
    data: TeamPayloadDep,
    request: Request,
    user: CurrentUser,
    fmt: ResponseFormatDep,
    settings: SettingsDep,
    service: TeamServiceDep,
) -> Response:
    """Update a team the user belongs to. Only fields sent are changed.

    POST is accepted for HTML forms, which cannot send PUT or PATCH.
    """
    team = _load_team(team_id, service)
    if not _authorize(user, TeamAction.UPDATE, team):
        return _denied(fmt, settings)

    try:
        updated = service.update(team, data)
    except TeamValidationError as e:
        logger.warning("team_update_validation_failed", team_id=team_id, errors=e.errors)
        if fmt == ResponseFormat.JSON:
            return JSONResponse(e.errors, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
        return _render(
            request,
            "teams/edit.html",
            {
                "team": service.preview(team, data),
                "users": service.users_for_form(),
                "current_user": user,
                "errors": e.errors,
            },
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )
    except Exception as e:
        raise _unexpected("update", e, team_id=team_id) from e

    logger.info(
        "team_updated",
        team_id=team_id,
        updated_fields=sorted(data.team_fields()),
        user_id=user.id,
    )

    if fmt == ResponseFormat.JSON:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return _redirect(f"{router.prefix}/{updated.id}")


# =============================================================================
# DELETE (team members)
# =============================================================================


@router.delete("/{team_id}", response_model=None)
@router.post("/{team_id}/delete", response_model=None)
def delete_team(
    team_id: str,
    user: CurrentUser,
    fmt: ResponseFormatDep,
    settings: SettingsDep,
    service: TeamServiceDep,
) -> Response:
    """Delete a team and every row attached to it."""
    team = _load_team(team_id, service)
    if not _authorize(user, TeamAction.DESTROY, team):
        return _denied(fmt, settings)

    try:
        service.destroy(team)
    except Exception as e:
        raise _unexpected("delete", e, team_id=team_id) from e

    logger.info("team_deleted", team_id=team_id, team_name=team.name, user_id=user.id)

    if fmt == ResponseFormat.JSON:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return _redirect(router.prefix)
