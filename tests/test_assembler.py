from unittest import mock

import pytest

from drgym.extensions import db
from drgym.models import Activity, Exercise
from drgym.services import AggregateAssembler
from drgym.stores import ActivityStore, ExerciseStore, PostStore, WorkoutStore


@pytest.fixture
def assembler(seeded):
    session = db.session
    return AggregateAssembler(PostStore(session), WorkoutStore(session), ActivityStore(session), ExerciseStore(session))


def test_post_is_joined_with_workout_and_named_activities(assembler, make_workout, make_post):
    workout = make_workout("alice", activities=[(29, "pull up"), (39, "barbell squat"), (69, "jogging")])
    post = make_post("alice", workout=workout)

    result = assembler.assemble_post(post.id)

    assert result["id"] == post.id
    assert result["username"] == "alice"
    training = result["training"]
    assert training["id"] == workout.id
    assert [a["exercise_name"] for a in training["activities"]] == ["pull up", "barbell squat", "jogging"]
    assert all(a["workout_id"] == workout.id for a in training["activities"])


def test_post_without_workout(assembler, make_post):
    post = make_post("bob")
    assert assembler.assemble_post(post.id)["training"] is None


def test_missing_post_is_none(assembler):
    assert assembler.assemble_post(999) is None


def test_dangling_exercise_reference_degrades(assembler, make_workout, make_post):
    workout = make_workout("alice", activities=[(29, "pull up"), (4242, "deleted move")])
    post = make_post("alice", workout=workout)

    activities = assembler.assemble_post(post.id)["training"]["activities"]

    assert activities[0]["exercise_name"] == "pull up"
    assert activities[1]["exercise_id"] == 4242
    assert activities[1]["exercise_name"] is None


def test_read_overlays_current_name_without_persisting(assembler, make_workout):
    workout = make_workout("alice", activities=[(71, "sprinting")])
    db.session.get(Exercise, 71).name = "sprint intervals"
    db.session.commit()

    activities = assembler.assemble_workouts_for("alice")[0]["activities"]

    assert activities[0]["exercise_name"] == "sprint intervals"
    stored = Activity.query.filter_by(workout_id=workout.id).one()
    assert stored.exercise_name == "sprinting"


def test_empty_lists_are_not_errors(assembler):
    assert assembler.assemble_posts_for({"carol"}) == []
    assert assembler.assemble_posts_for(set()) == []
    assert assembler.assemble_workouts_for("carol") == []


def test_posts_for_several_users_newest_first(assembler, make_post):
    first = make_post("alice", title="first")
    second = make_post("bob", title="second")
    make_post("carol", title="not included")

    result = assembler.assemble_posts_for({"alice", "bob"})

    assert [p["id"] for p in result] == [second.id, first.id]


def test_each_exercise_is_resolved_once_per_assembly(seeded, make_workout):
    make_workout("alice", activities=[(29, "pull up"), (29, "pull up"), (39, "barbell squat")])
    make_workout("alice", activities=[(29, "pull up")])
    exercises = ExerciseStore(db.session)
    session = db.session
    assembler = AggregateAssembler(PostStore(session), WorkoutStore(session), ActivityStore(session), exercises)

    with mock.patch.object(exercises, "find_by_id", wraps=exercises.find_by_id) as find_by_id:
        workouts = assembler.assemble_workouts_for("alice")

    assert sum(len(w["activities"]) for w in workouts) == 4
    assert sorted(call.args[0] for call in find_by_id.call_args_list) == [29, 39]
