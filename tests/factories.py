"""Test-data builders for models, backed by Faker."""

import random
from datetime import datetime, timezone
from uuid import uuid4

from faker import Faker

from seasonteams.models import (
    Activity,
    Application,
    Role,
    Season,
    Source,
    Team,
    User,
)

fake = Faker()


def _id() -> str:
    return str(uuid4())


def make_season(**overrides) -> Season:
    data = {"id": _id(), "name": str(datetime.now(timezone.utc).year)}
    data.update(overrides)
    return Season(**data)


def make_user(**overrides) -> User:
    data = {
        "id": _id(),
        "github_handle": fake.unique.user_name(),
        "name": fake.name(),
    }
    data.update(overrides)
    return User(**data)


def make_role(team: Team, user: User | None = None, **overrides) -> Role:
    user = user or make_user()
    data = {
        "id": _id(),
        "team_id": team.id,
        "user_id": user.id,
        "name": "student",
        "github_handle": user.github_handle,
    }
    data.update(overrides)
    return Role(**data)


def make_source(team: Team, **overrides) -> Source:
    data = {"id": _id(), "team_id": team.id, "kind": "blog", "url": fake.url()}
    data.update(overrides)
    return Source(**data)


def make_activity(team: Team, created_at: datetime, **overrides) -> Activity:
    data = {
        "id": _id(),
        "team_id": team.id,
        "kind": "feed_entry",
        "title": fake.sentence(),
        "created_at": created_at,
    }
    data.update(overrides)
    return Activity(**data)


def make_team(season: Season, members: list[User] | None = None, **overrides) -> Team:
    """A persisted-looking team in ``season``, optionally with student members."""
    data = {
        "id": _id(),
        "season_id": season.id,
        "name": fake.unique.company(),
        "description": fake.paragraph(),
        "twitter_handle": fake.user_name(),
        "github_handle": fake.user_name(),
    }
    data.update(overrides)
    team = Team(**data)
    for member in members or []:
        team.roles.append(make_role(team, member))
    return team


def make_application(team: Team, **overrides) -> Application:
    application_data = {
        "project_name": fake.catch_phrase(),
        "student0_application_coding_level": 2,
        "student1_application_coding_level": 2,
        "student_name": fake.name(),
        "location": fake.city(),
        "minimum_money": random.randrange(100),
        "coaches_hours_per_week": 3,
    }
    application_data.update(overrides.pop("application_data", {}))
    data = {
        "id": _id(),
        "team_id": team.id,
        "season_id": team.season_id,
        "application_data": application_data,
    }
    data.update(overrides)
    return Application(**data)
