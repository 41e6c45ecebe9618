import click

from drgym.extensions import db
from drgym.models import Exercise, User

# catalog ids are referenced by existing activities, keep them stable
DEFAULT_EXERCISES = [
    {"id": 29, "name": "pull up", "category": "strength"},
    {"id": 39, "name": "barbell squat", "category": "strength"},
    {"id": 57, "name": "sit ups", "category": "strength"},
    {"id": 69, "name": "jogging", "category": "cardio"},
    {"id": 71, "name": "sprinting", "category": "cardio"},
    {"id": 73, "name": "cycling", "category": "cardio"},
]


def seed_exercises(exercises=DEFAULT_EXERCISES):
    """Insert catalog entries that are not there yet. Returns how many were added."""
    added = 0
    for entry in exercises:
        if db.session.get(Exercise, entry["id"]) is None:
            db.session.add(Exercise(**entry))
            added += 1
    db.session.commit()
    return added


def register_commands(app):
    @app.cli.command("init-db")
    def init_db_command():
        """Create all tables."""
        db.create_all()
        click.echo("Database initialized.")

    @app.cli.command("seed-exercises")
    def seed_exercises_command():
        """Load the default exercise catalog."""
        added = seed_exercises()
        click.echo(f"{added} exercise(s) added.")

    @app.cli.command("create-user")
    @click.argument("username")
    @click.option("--email", required=True)
    @click.option("--name", required=True)
    @click.option("--surname", default=None)
    @click.password_option()
    def create_user_command(username, email, name, surname, password):
        """Create a user account."""
        if User.query.filter((User.username == username) | (User.email == email)).first():
            click.echo(f"User '{username}' or email '{email}' already exists.")
            return

        user = User(username=username, email=email, name=name, surname=surname)
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
        click.echo(f"User '{username}' created.")
