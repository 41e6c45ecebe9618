from datetime import date, datetime

import pytest

from drgym.errors import ValidationFailure
from drgym.extensions import db
from drgym.services import ExerciseStats, parse_period
from drgym.services.exercise_stats import activity_level
from drgym.stores import ActivityStore, ExerciseStore, WorkoutStore


@pytest.fixture
def stats(seeded):
    session = db.session
    return ExerciseStats(WorkoutStore(session), ActivityStore(session), ExerciseStore(session))


def test_parse_period():
    assert parse_period({"startDate": "2024-11-01", "endDate": "2024-11-30"}) == (
        date(2024, 11, 1), date(2024, 11, 30),
    )


@pytest.mark.parametrize("args", [
    {},
    {"startDate": "2024-11-01"},
    {"startDate": "yesterday", "endDate": "2024-11-30"},
    {"startDate": "2024-11-30", "endDate": "2024-11-01"},
])
def test_parse_period_rejects_bad_input(args):
    with pytest.raises(ValidationFailure):
        parse_period(args)


@pytest.mark.parametrize("count, busiest, level", [
    (0, 5, 0),
    (1, 6, 1),
    (2, 6, 1),
    (3, 6, 2),
    (5, 6, 3),
    (6, 6, 3),
])
def test_activity_level(count, busiest, level):
    assert activity_level(count, busiest) == level


def test_end_date_is_inclusive(stats, make_workout):
    make_workout("alice", activities=[(29, "pull up")], start=datetime(2024, 11, 30, 23, 30))
    make_workout("alice", activities=[(69, "jogging")], start=datetime(2024, 12, 1, 0, 0))

    entries = stats.exercises_in_period("alice", date(2024, 11, 1), date(2024, 11, 30))

    assert [e["exercise_name"] for e in entries] == ["pull up"]
    assert entries[0]["date"] == "2024-11-30"


def test_daily_count_merges_workouts_of_the_same_day(stats, make_workout):
    make_workout("alice", activities=[(29, "pull up"), (39, "barbell squat")], start=datetime(2024, 11, 4, 8, 0))
    make_workout("alice", activities=[(57, "sit ups")], start=datetime(2024, 11, 4, 18, 0))
    make_workout("alice", activities=[(69, "jogging")], start=datetime(2024, 11, 5, 7, 0))
    make_workout("bob", activities=[(71, "sprinting")], start=datetime(2024, 11, 4, 9, 0))

    days = stats.daily_exercise_count("alice", date(2024, 11, 1), date(2024, 11, 30))

    assert days == [
        {"date": "2024-11-04", "count": 3, "level": 3},
        {"date": "2024-11-05", "count": 1, "level": 1},
    ]


def test_empty_period(stats):
    assert stats.daily_exercise_count("carol", date(2024, 11, 1), date(2024, 11, 30)) == []
    assert stats.exercises_in_period("carol", date(2024, 11, 1), date(2024, 11, 30)) == []
