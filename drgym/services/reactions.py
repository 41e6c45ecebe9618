import logging
from datetime import datetime

from sqlalchemy.exc import IntegrityError

from drgym.errors import PersistenceFailure
from drgym.models import PostReaction
from drgym.schemas import ReactionSchema

logger = logging.getLogger(__name__)

reactions_schema = ReactionSchema(many=True)


class ReactionService:
    def __init__(self, reaction_store):
        self.store = reaction_store

    def list_for_post(self, post_id):
        return reactions_schema.dump(self.store.find_by_post_id(post_id))

    def _touch(self, post_id, username):
        reaction = self.store.find(post_id, username)
        if reaction is None:
            reaction = PostReaction(post_id=post_id, username=username)
        reaction.created_at = datetime.utcnow()
        self.store.save(reaction)
        self.store.commit()
        return reaction

    def add(self, post_id, username):
        """At most one reaction per (post, user); adding again only refreshes it."""
        try:
            try:
                return self._touch(post_id, username)
            except IntegrityError:
                # the same reaction was inserted concurrently
                self.store.rollback()
                logger.debug("Reaction of %s to post %s already exists", username, post_id)
                return self._touch(post_id, username)
        except Exception as exc:
            self.store.rollback()
            logger.exception("Failed to add reaction of %s to post %s", username, post_id)
            raise PersistenceFailure("Failed to add reaction") from exc

    def remove(self, post_id, username):
        try:
            removed = self.store.delete_by_username_and_post_id(username, post_id)
            self.store.commit()
        except Exception as exc:
            self.store.rollback()
            logger.exception("Failed to remove reaction of %s from post %s", username, post_id)
            raise PersistenceFailure("Failed to remove reaction") from exc
        return removed
