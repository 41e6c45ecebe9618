from datetime import datetime, timedelta, timezone

import jwt as pyjwt
import pytest

from drgym import create_app
from drgym.commands import seed_exercises
from drgym.extensions import db
from drgym.models import Activity, Friendship, Post, User, Workout


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_token(app):
    """Mint a credential the way the login service does."""
    def _make(username, expires_in=timedelta(hours=1), secret=None, algorithm="HS256", **claims):
        now = datetime.now(timezone.utc)
        payload = {"sub": username, "iat": now, "exp": now + expires_in}
        payload.update(claims)
        return pyjwt.encode(payload, secret or app.config["JWT_SECRET_KEY"], algorithm=algorithm)
    return _make


@pytest.fixture
def auth(make_token):
    def _auth(username, **kwargs):
        return {"Authorization": f"Bearer {make_token(username, **kwargs)}"}
    return _auth


def _user(username, **fields):
    user = User(
        username=username,
        email=f"{username}@example.com",
        name=username.capitalize(),
        surname="Tester",
        weight=fields.get("weight", 75.0),
        height=fields.get("height", 180.0),
    )
    user.set_password("Password123!")
    return user


@pytest.fixture
def seeded(app):
    """alice and bob are friends, carol knows nobody."""
    for username in ("alice", "bob", "carol"):
        db.session.add(_user(username))
    db.session.add(Friendship(user_min="alice", user_max="bob"))
    db.session.commit()
    seed_exercises()
    return db.session


@pytest.fixture
def make_workout(seeded):
    def _make(username, activities=(), start=datetime(2024, 11, 1, 17, 41)):
        workout = Workout(
            username=username,
            start_date=start,
            end_date=start + timedelta(hours=1),
            description="Leg day",
        )
        db.session.add(workout)
        db.session.flush()
        for exercise_id, name in activities:
            db.session.add(Activity(workout_id=workout.id, exercise_id=exercise_id, exercise_name=name, reps=10))
        db.session.commit()
        return workout
    return _make


@pytest.fixture
def make_post(seeded):
    def _make(username, title="Morning session", workout=None):
        post = Post(username=username, title=title, content="Felt great",
                    workout_id=workout.id if workout is not None else None)
        db.session.add(post)
        db.session.commit()
        return post
    return _make
