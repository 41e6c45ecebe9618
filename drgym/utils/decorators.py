# drgym/utils/decorators.py
from functools import wraps

from flask import current_app, request

from drgym.errors import Unauthorized
from drgym.services import Relation, get_access_guard, get_token_verifier


def credential_from_request():
    """The bearer credential from the jwt cookie or the Authorization header, or None."""
    locations = current_app.config.get("JWT_TOKEN_LOCATION", ["cookies"])

    if "cookies" in locations:
        token = request.cookies.get(current_app.config.get("JWT_ACCESS_COOKIE_NAME", "jwt"))
        if token:
            return token

    if "headers" in locations:
        header = request.headers.get(current_app.config.get("JWT_HEADER_NAME", "Authorization"), "")
        header_type = current_app.config.get("JWT_HEADER_TYPE", "Bearer")
        parts = header.split()
        if len(parts) == 2 and parts[0] == header_type:
            return parts[1]

    return None


def current_verification():
    return get_token_verifier().verify(credential_from_request())


def require_identity(view_func):
    """
    Rejects requests without a valid credential before the view runs.
    The verified identity is passed to the view as ``identity``.
    """
    @wraps(view_func)
    def wrapper(*args, **kwargs):
        verification = current_verification()
        if not verification.ok:
            raise Unauthorized()
        kwargs["identity"] = verification.identity
        return view_func(*args, **kwargs)
    return wrapper


def require_access(relation, owner="username"):
    """
    Guards a view with ``relation`` (Relation.OWNER or Relation.OWNER_OR_FRIEND)
    against the resource owner.

    ``owner`` is either the name of a URL argument or a callable receiving the
    view kwargs and returning the owner username. The credential is checked
    first, so a bad credential never reaches a store.
    """
    def decorator(view_func):
        @wraps(view_func)
        def wrapper(*args, **kwargs):
            verification = current_verification()
            if not verification.ok:
                raise Unauthorized()

            owner_username = owner(kwargs) if callable(owner) else kwargs.get(owner)
            if not get_access_guard().authorize(relation, verification, owner_username):
                raise Unauthorized()

            kwargs["identity"] = verification.identity
            return view_func(*args, **kwargs)
        return wrapper
    return decorator


def payload_username(kwargs):
    payload = request.get_json(silent=True)
    return payload.get("username") if isinstance(payload, dict) else None


def query_username(kwargs):
    return request.args.get("username")


def owner_only(owner="username"):
    return require_access(Relation.OWNER, owner)


def owner_or_friend(owner="username"):
    return require_access(Relation.OWNER_OR_FRIEND, owner)
