import os

from flask import Flask

from drgym.config import config
from drgym.errors import register_error_handlers
from drgym.extensions import db, ma, jwt, migrate, cors
from drgym.logger import configure_logging
from drgym.services import VERIFIER_KEY, TokenVerifier


def create_app(config_name=None):
    app = Flask(__name__)

    config_name = config_name or os.getenv("FLASK_CONFIG", "default")
    app.config.from_object(config[config_name])

    logger = configure_logging(app)

    # extensions
    db.init_app(app)
    ma.init_app(app)
    jwt.init_app(app)
    migrate.init_app(app, db)
    cors.init_app(app, resources={r"/api/*": {
        "origins": app.config["CORS_ORIGINS"],
        "allow_headers": ["Content-Type", "Authorization"],
        "methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        "supports_credentials": True,
    }})

    # the secret is read once here and handed to the verifier
    app.extensions[VERIFIER_KEY] = TokenVerifier(
        app.config["JWT_SECRET_KEY"],
        algorithm=app.config.get("JWT_ALGORITHM", "HS256"),
    )

    register_error_handlers(app)

    # Blueprints
    from drgym.routes.posts import posts_bp
    from drgym.routes.users import users_bp
    from drgym.routes.exercises import exercises_bp

    app.register_blueprint(posts_bp, url_prefix="/api/posts")
    app.register_blueprint(users_bp, url_prefix="/api/users")
    app.register_blueprint(exercises_bp, url_prefix="/api/exercises")

    from drgym.commands import register_commands
    register_commands(app)

    logger.info("DrGym API started with %s config", config_name)
    return app
