from datetime import datetime, timedelta, timezone

import jwt as pyjwt
import pytest
from flask_jwt_extended import create_access_token

from drgym.services import TokenVerifier, VerificationError

SECRET = "unit-test-secret-key-that-is-long-enough"


@pytest.fixture
def verifier():
    return TokenVerifier(SECRET)


def encode(claims, secret=SECRET, algorithm="HS256"):
    return pyjwt.encode(claims, secret, algorithm=algorithm)


def valid_claims(subject="alice", expires_in=timedelta(hours=1)):
    return {"sub": subject, "exp": datetime.now(timezone.utc) + expires_in}


def test_missing_credential(verifier):
    for credential in (None, ""):
        result = verifier.verify(credential)
        assert not result.ok
        assert result.error is VerificationError.MISSING_CREDENTIAL


def test_valid_credential_yields_subject(verifier):
    result = verifier.verify(encode(valid_claims("alice")))
    assert result.ok
    assert result.subject == "alice"
    assert result.identity.expires_at > datetime.now(timezone.utc)


def test_wrong_secret_is_invalid_signature(verifier):
    token = encode(valid_claims(), secret="another-secret-key-that-is-long-enough")
    assert verifier.verify(token).error is VerificationError.INVALID_SIGNATURE


def test_wrong_algorithm_is_invalid_signature(verifier):
    token = encode(valid_claims(), algorithm="HS512")
    assert verifier.verify(token).error is VerificationError.INVALID_SIGNATURE


@pytest.mark.parametrize("credential", ["garbage", "a.b.c", "Bearer", 12345, b"\x00\x01"])
def test_malformed_credential_never_raises(verifier, credential):
    assert verifier.verify(credential).error is VerificationError.INVALID_SIGNATURE


def test_missing_claims_are_invalid(verifier):
    no_exp = encode({"sub": "alice"})
    no_sub = encode({"exp": datetime.now(timezone.utc) + timedelta(hours=1)})
    assert verifier.verify(no_exp).error is VerificationError.INVALID_SIGNATURE
    assert verifier.verify(no_sub).error is VerificationError.INVALID_SIGNATURE


def test_expired_credential(verifier):
    token = encode(valid_claims(expires_in=timedelta(seconds=-1)))
    result = verifier.verify(token)
    assert not result.ok
    assert result.error is VerificationError.EXPIRED


def test_expiry_is_checked_against_given_time(verifier):
    token = encode(valid_claims(expires_in=timedelta(minutes=5)))
    later = datetime.now(timezone.utc) + timedelta(minutes=10)
    assert verifier.verify(token).ok
    assert verifier.verify(token, now=later).error is VerificationError.EXPIRED


def test_secret_key_is_required():
    with pytest.raises(ValueError):
        TokenVerifier("")


def test_accepts_tokens_issued_with_flask_jwt_extended(app):
    token = create_access_token(identity="alice")
    verifier = TokenVerifier(app.config["JWT_SECRET_KEY"], app.config["JWT_ALGORITHM"])
    result = verifier.verify(token)
    assert result.ok
    assert result.subject == "alice"
