import enum
import logging

logger = logging.getLogger(__name__)


class Relation(enum.Enum):
    OWNER = "owner"
    OWNER_OR_FRIEND = "owner_or_friend"


class AccessGuard:
    def __init__(self, friend_graph):
        self.friend_graph = friend_graph

    @staticmethod
    def _valid(verification, now=None):
        return (
            verification is not None
            and verification.ok
            and not verification.identity.is_expired(now)
        )

    def authorize_owner_only(self, verification, owner_username, now=None):
        return self._valid(verification, now) and verification.subject == owner_username

    def authorize_owner_or_friend(self, verification, owner_username, now=None):
        if not self._valid(verification, now):
            return False
        if verification.subject == owner_username:
            return True
        return self.friend_graph.are_friends(verification.subject, owner_username)

    def authorize(self, relation, verification, owner_username, now=None):
        if relation is Relation.OWNER:
            allowed = self.authorize_owner_only(verification, owner_username, now)
        else:
            allowed = self.authorize_owner_or_friend(verification, owner_username, now)
        if not allowed:
            logger.debug(
                "Denied %s access to %r for %r",
                relation.value, owner_username, verification.subject if verification else None,
            )
        return allowed
