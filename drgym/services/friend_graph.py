import logging

from sqlalchemy.exc import IntegrityError

logger = logging.getLogger(__name__)


class FriendGraph:
    """Symmetric friend relation over usernames.

    Each edge is a single row keyed by the ordered pair, so adding or removing
    it updates both directions in one write.
    """

    def __init__(self, store):
        self.store = store

    def are_friends(self, username_a, username_b):
        if not username_a or not username_b or username_a == username_b:
            return False
        return self.store.exists(username_a, username_b)

    def add_friend(self, username_a, username_b):
        """Returns True when a new edge was written."""
        if username_a == username_b:
            return False
        if self.store.exists(username_a, username_b):
            return False
        try:
            self.store.insert(username_a, username_b)
            self.store.commit()
        except IntegrityError:
            # the same pair was inserted concurrently
            self.store.rollback()
            logger.debug("Friendship %s-%s already exists", username_a, username_b)
            return False
        logger.info("Friendship added: %s <-> %s", username_a, username_b)
        return True

    def remove_friend(self, username_a, username_b):
        if username_a == username_b:
            return False
        removed = self.store.delete_pair(username_a, username_b)
        self.store.commit()
        if removed:
            logger.info("Friendship removed: %s <-> %s", username_a, username_b)
        return removed

    def friends_of(self, username):
        return self.store.partners_of(username)
