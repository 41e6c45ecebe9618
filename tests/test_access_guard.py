from datetime import datetime, timedelta, timezone
from unittest import mock

import pytest

from drgym.services import AccessGuard, Identity, Relation, Verification, VerificationError


def verified(subject, expires_in=timedelta(hours=1)):
    return Verification(identity=Identity(subject, datetime.now(timezone.utc) + expires_in))


@pytest.fixture
def graph():
    graph = mock.Mock()
    graph.are_friends.side_effect = lambda a, b: {a, b} == {"alice", "bob"}
    return graph


@pytest.fixture
def guard(graph):
    return AccessGuard(graph)


def test_owner_passes_both_checks(guard, graph):
    assert guard.authorize_owner_only(verified("alice"), "alice")
    assert guard.authorize_owner_or_friend(verified("alice"), "alice")
    graph.are_friends.assert_not_called()


def test_friend_passes_owner_or_friend_only(guard):
    assert guard.authorize_owner_or_friend(verified("bob"), "alice")
    assert not guard.authorize_owner_only(verified("bob"), "alice")


def test_stranger_is_rejected(guard):
    assert not guard.authorize_owner_or_friend(verified("carol"), "alice")
    assert not guard.authorize_owner_only(verified("carol"), "alice")


@pytest.mark.parametrize("error", list(VerificationError))
def test_failed_verification_never_reaches_graph(guard, graph, error):
    failed = Verification.failed(error)
    assert not guard.authorize_owner_only(failed, "alice")
    assert not guard.authorize_owner_or_friend(failed, "alice")
    assert not guard.authorize_owner_or_friend(None, "alice")
    graph.are_friends.assert_not_called()


def test_expired_identity_is_rejected(guard, graph):
    expired = verified("alice", expires_in=timedelta(seconds=-1))
    assert not guard.authorize_owner_only(expired, "alice")
    assert not guard.authorize_owner_or_friend(expired, "alice")
    graph.are_friends.assert_not_called()


def test_identity_expiring_before_now_is_rejected(guard):
    verification = verified("bob", expires_in=timedelta(minutes=1))
    later = datetime.now(timezone.utc) + timedelta(minutes=2)
    assert not guard.authorize_owner_or_friend(verification, "alice", now=later)


def test_authorize_dispatches_on_relation(guard):
    assert guard.authorize(Relation.OWNER_OR_FRIEND, verified("bob"), "alice")
    assert not guard.authorize(Relation.OWNER, verified("bob"), "alice")
