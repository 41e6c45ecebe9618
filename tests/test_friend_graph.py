from drgym.extensions import db
from drgym.models import Friendship
from drgym.services import FriendGraph
from drgym.stores import FriendshipStore


def graph():
    return FriendGraph(FriendshipStore(db.session))


def test_add_friend_is_symmetric(seeded):
    assert graph().add_friend("carol", "alice") is True
    assert graph().are_friends("carol", "alice")
    assert graph().are_friends("alice", "carol")


def test_add_friend_is_idempotent(seeded):
    graph().add_friend("carol", "bob")
    assert graph().add_friend("bob", "carol") is False
    assert graph().add_friend("carol", "bob") is False
    assert Friendship.query.filter_by(user_min="bob", user_max="carol").count() == 1


def test_no_self_friendship(seeded):
    assert graph().add_friend("carol", "carol") is False
    assert not graph().are_friends("carol", "carol")
    assert Friendship.query.count() == 1


def test_remove_friend_clears_both_sides(seeded):
    assert graph().remove_friend("bob", "alice") is True
    assert not graph().are_friends("alice", "bob")
    assert not graph().are_friends("bob", "alice")


def test_removing_missing_edge_is_noop(seeded):
    assert graph().remove_friend("alice", "carol") is False
    assert graph().are_friends("alice", "bob")


def test_friends_of(seeded):
    graph().add_friend("alice", "carol")
    assert graph().friends_of("alice") == ["bob", "carol"]
    assert graph().friends_of("bob") == ["alice"]
    assert graph().friends_of("nobody") == []
