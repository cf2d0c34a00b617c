"""Tests for season-phase visibility and list ordering."""

from datetime import timedelta

import pytest

from seasonteams.models import SeasonPhase
from seasonteams.services.listing import (
    SortDirection,
    display_roles,
    sort_by_activity,
    sort_by_kind_and_name,
    visible_teams,
)
from tests.factories import make_activity, make_season, make_team


class TestSeasonPhase:
    """Tests for the season phase switch."""

    def test_unset_notification_is_pre_notification(self, now):
        season = make_season(acceptance_notification_at=None)
        assert season.phase(now) == SeasonPhase.PRE_NOTIFICATION

    def test_future_notification_is_pre_notification(self, now):
        season = make_season(acceptance_notification_at=now + timedelta(days=1))
        assert season.phase(now) == SeasonPhase.PRE_NOTIFICATION
        assert not season.acceptance_letters_sent(now)

    def test_past_notification_is_post_notification(self, now):
        season = make_season(acceptance_notification_at=now - timedelta(days=1))
        assert season.phase(now) == SeasonPhase.POST_NOTIFICATION
        assert season.acceptance_letters_sent(now)

    def test_notification_at_exactly_now_is_post_notification(self, now):
        season = make_season(acceptance_notification_at=now)
        assert season.phase(now) == SeasonPhase.POST_NOTIFICATION


class TestVisibleTeams:
    """Tests for which teams the public list shows."""

    def test_before_acceptance_letters(self, now, season, last_season):
        """Only this season's undecided, visible teams are listed."""
        season.acceptance_notification_at = now + timedelta(days=1)
        unaccepted = make_team(season, kind=None)
        invisible = make_team(season, kind=None, invisible=True)
        last_years = make_team(last_season, kind="sponsored")

        result = visible_teams([unaccepted, invisible, last_years], season, now)

        assert result == [unaccepted]

    def test_after_acceptance_letters(self, now, season, last_season):
        """Only this season's teams with a kind are listed."""
        season.acceptance_notification_at = now - timedelta(days=1)
        voluntary = make_team(season, kind="voluntary")
        sponsored = make_team(season, kind="sponsored")
        unaccepted = make_team(season, kind=None)
        last_years = make_team(last_season, kind="sponsored")

        result = visible_teams([voluntary, sponsored, unaccepted, last_years], season, now)

        assert {team.id for team in result} == {voluntary.id, sponsored.id}

    def test_invisible_flag_only_applies_before_letters(self, now, season):
        season.acceptance_notification_at = now - timedelta(days=1)
        hidden_but_accepted = make_team(season, kind="sponsored", invisible=True)

        assert visible_teams([hidden_but_accepted], season, now) == [hidden_but_accepted]

    def test_past_seasons_never_listed(self, now, season, last_season):
        undecided = make_team(last_season, kind=None)
        decided = make_team(last_season, kind="voluntary")

        season.acceptance_notification_at = None
        assert visible_teams([undecided, decided], season, now) == []

        season.acceptance_notification_at = now - timedelta(days=1)
        assert visible_teams([undecided, decided], season, now) == []


class TestOrdering:
    """Tests for the two list orderings."""

    def test_kind_then_name_with_undecided_last(self, season):
        zebra = make_team(season, kind="sponsored", name="Zebra")
        alpha = make_team(season, kind="sponsored", name="alpha")
        voluntary = make_team(season, kind="voluntary", name="Beta")
        undecided = make_team(season, kind=None, name="Aardvark")

        result = sort_by_kind_and_name([undecided, voluntary, zebra, alpha])

        assert [team.name for team in result] == ["alpha", "Zebra", "Beta", "Aardvark"]

    def test_activity_descending(self, now, season):
        old = make_team(season, kind="sponsored", name="Old")
        old.activities = [make_activity(old, now - timedelta(days=10))]
        recent = make_team(season, kind="sponsored", name="Recent")
        recent.activities = [
            make_activity(recent, now - timedelta(days=20)),
            make_activity(recent, now - timedelta(days=1)),
        ]
        quiet = make_team(season, kind="sponsored", name="Quiet")

        result = sort_by_activity([old, recent, quiet], SortDirection.DESC)

        # No activity sorts first when descending
        assert [team.name for team in result] == ["Quiet", "Recent", "Old"]

    def test_activity_ascending(self, now, season):
        old = make_team(season, kind="sponsored", name="Old")
        old.activities = [make_activity(old, now - timedelta(days=10))]
        recent = make_team(season, kind="sponsored", name="Recent")
        recent.activities = [
            make_activity(recent, now - timedelta(days=20)),
            make_activity(recent, now - timedelta(days=1)),
        ]
        quiet = make_team(season, kind="sponsored", name="Quiet")

        result = sort_by_activity([quiet, old, recent], SortDirection.ASC)

        # Oldest activity decides when ascending; no activity goes last
        assert [team.name for team in result] == ["Recent", "Old", "Quiet"]

    def test_activity_order_grouped_by_kind(self, now, season):
        voluntary = make_team(season, kind="voluntary")
        voluntary.activities = [make_activity(voluntary, now)]
        sponsored = make_team(season, kind="sponsored")
        sponsored.activities = [make_activity(sponsored, now - timedelta(days=30))]

        result = sort_by_activity([voluntary, sponsored], SortDirection.DESC)

        assert result == [sponsored, voluntary]

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("asc", SortDirection.ASC),
            ("desc", SortDirection.DESC),
            ("ASC", SortDirection.DESC),
            ("sideways", SortDirection.DESC),
            (None, SortDirection.DESC),
        ],
    )
    def test_direction_parsing(self, value, expected):
        assert SortDirection.parse(value) == expected


def test_display_roles_are_pluralized():
    assert display_roles() == ["students"]
