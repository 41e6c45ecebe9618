"""Bearer credential verification.

Tokens are issued by the login service; here they are only decoded and
checked against the shared secret.
"""
import enum
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

import jwt


class VerificationError(enum.Enum):
    MISSING_CREDENTIAL = "missing_credential"
    INVALID_SIGNATURE = "invalid_signature"
    EXPIRED = "expired"


@dataclass(frozen=True)
class Identity:
    subject: str
    expires_at: datetime

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        now = now or datetime.now(timezone.utc)
        return self.expires_at <= now


@dataclass(frozen=True)
class Verification:
    """Outcome of ``TokenVerifier.verify``: exactly one of the two fields is set."""
    identity: Optional[Identity] = None
    error: Optional[VerificationError] = None

    @property
    def ok(self) -> bool:
        return self.identity is not None and self.error is None

    @property
    def subject(self) -> Optional[str]:
        return self.identity.subject if self.identity else None

    @classmethod
    def failed(cls, error: VerificationError) -> "Verification":
        return cls(error=error)


class TokenVerifier:
    def __init__(self, secret_key: str, algorithm: str = "HS256"):
        if not secret_key:
            raise ValueError("TokenVerifier needs a secret key")
        self._secret_key = secret_key
        self.algorithm = algorithm

    def verify(self, credential: Optional[str], now: Optional[datetime] = None) -> Verification:
        if not credential:
            return Verification.failed(VerificationError.MISSING_CREDENTIAL)

        try:
            claims = jwt.decode(
                credential,
                self._secret_key,
                algorithms=[self.algorithm],
                # expiry is compared below against the caller's clock
                options={"require": ["sub", "exp"], "verify_exp": False},
            )
            expires_at = datetime.fromtimestamp(int(claims["exp"]), tz=timezone.utc)
            subject = claims["sub"]
        except (jwt.PyJWTError, TypeError, ValueError, OverflowError):
            return Verification.failed(VerificationError.INVALID_SIGNATURE)

        if not isinstance(subject, str) or not subject:
            return Verification.failed(VerificationError.INVALID_SIGNATURE)

        identity = Identity(subject=subject, expires_at=expires_at)
        if identity.is_expired(now):
            return Verification.failed(VerificationError.EXPIRED)
        return Verification(identity=identity)
