"""Season Teams admin CLI.

Usage:
    seasonteams seasons current
    seasonteams seasons notify --at 2026-07-01T12:00:00
    seasonteams seasons notify --clear
    seasonteams teams list --sort created_at --direction asc
"""

from datetime import datetime, timezone

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from seasonteams import configure_logging, get_logger

# Load .env before settings are first read
load_dotenv()

console = Console()
logger = get_logger(__name__)

app = typer.Typer(
    name="seasonteams",
    help="Season Teams admin CLI",
    no_args_is_help=True,
)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging")):
    """Configure logging for every command."""
    configure_logging("DEBUG" if verbose else "WARNING")


# =============================================================================
# SEASON COMMANDS
# =============================================================================

seasons_app = typer.Typer(help="Season commands", no_args_is_help=True)
app.add_typer(seasons_app, name="seasons")


def _season_table(title: str, season) -> Table:
    table = Table(title=title)
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    now = datetime.now(timezone.utc)
    table.add_row("ID", season.id or "-")
    table.add_row("Name", season.name)
    table.add_row(
        "Acceptance notification",
        season.acceptance_notification_at.isoformat()
        if season.acceptance_notification_at
        else "-",
    )
    table.add_row("Phase", season.phase(now).value)
    return table


@seasons_app.command("current")
def seasons_current():
    """Show the current season (created if missing)."""
    from seasonteams.dao import SeasonDAO

    season = SeasonDAO().current()
    console.print(_season_table("Current Season", season))


@seasons_app.command("notify")
def seasons_notify(
    at: datetime = typer.Option(None, "--at", help="When letters were sent, UTC (default: now)"),
    clear: bool = typer.Option(False, "--clear", help="Unset the notification timestamp"),
):
    """Record when acceptance letters went out for the current season."""
    from seasonteams.dao import SeasonDAO

    if clear and at:
        console.print("[red]Error: --at and --clear are mutually exclusive[/red]")
        raise typer.Exit(1)

    dao = SeasonDAO()
    season = dao.current()

    when = None
    if not clear:
        when = at or datetime.now(timezone.utc)
        if when.tzinfo is None:
            when = when.replace(tzinfo=timezone.utc)

    updated = dao.set_acceptance_notification_at(season.id, when)
    if updated is None:
        console.print(f"[red]Error: season {season.name} not found[/red]")
        raise typer.Exit(1)

    logger.info(
        "season_notification_set",
        season=updated.name,
        acceptance_notification_at=when.isoformat() if when else None,
    )
    console.print(_season_table("Updated Season", updated))


# =============================================================================
# TEAM COMMANDS
# =============================================================================

teams_app = typer.Typer(help="Team commands", no_args_is_help=True)
app.add_typer(teams_app, name="teams")


@teams_app.command("list")
def teams_list(
    sort: str = typer.Option(None, "--sort", "-s", help="Any value orders by activity"),
    direction: str = typer.Option(None, "--direction", "-d", help="asc or desc"),
):
    """List the teams the public team page shows right now."""
    from seasonteams.dao import SeasonDAO
    from seasonteams.services import TeamService

    now = datetime.now(timezone.utc)
    season = SeasonDAO().current(now.date())

    with console.status("Loading teams..."):
        teams = TeamService().list_teams(season, now, sort=sort, direction=direction)

    if not teams:
        console.print(f"[yellow]No teams listed for season {season.name}[/yellow]")
        return

    table = Table(title=f"Teams {season.name} ({season.phase(now).value})")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Kind")
    table.add_column("Members")

    for team in teams:
        members = ", ".join(
            f"{role.github_handle} ({role.name})" for role in team.roles if role.github_handle
        )
        table.add_row(team.id or "-", team.name or "-", team.kind or "-", members or "-")

    console.print(table)


if __name__ == "__main__":
    app()
