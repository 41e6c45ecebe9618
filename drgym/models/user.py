from datetime import datetime
from werkzeug.security import generate_password_hash
from drgym.extensions import db

USERS_TABLE = "users"

class User(db.Model):
    __tablename__ = USERS_TABLE

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(64), unique=True, nullable=False, index=True)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    name = db.Column(db.String(150), nullable=False)
    surname = db.Column(db.String(150), nullable=True)
    password_hash = db.Column(db.String(255), nullable=False)

    # Body metrics
    weight = db.Column(db.Float, nullable=True)  # kg
    height = db.Column(db.Float, nullable=True)  # cm

    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    # Helpers
    def set_password(self, password: str):
        self.password_hash = generate_password_hash(password)

    def __repr__(self):
        return f"<User {self.username}>"
