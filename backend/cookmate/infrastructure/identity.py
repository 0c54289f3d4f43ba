"""Identity Verifier — resolves a bearer token into an Identity.

Invariants:
    - verify() returns Identity(subject_id, email) or raises UnauthenticatedError
    - Signature, expiry and audience are all checked; any failure is the same 401
    - The subject claim must be a UUID (it is stored as users.auth_id)

Design Decisions:
    - Local HS256 verification with the provider's signing secret (python-jose):
      no network round-trip to the identity provider per request
    - Verifier is a class so tests and alternative providers can swap it via
      FastAPI dependency overrides
"""

import logging
from uuid import UUID

from jose import JWTError, jwt

from cookmate.core.domain_types import Identity, SubjectId
from cookmate.core.errors import UnauthenticatedError

logger = logging.getLogger(__name__)


class JWTIdentityVerifier:
    """Verifies identity-provider access tokens signed with a shared secret."""

    def __init__(self, secret: str, audience: str, algorithm: str = "HS256"):
        self._secret = secret
        self._audience = audience
        self._algorithm = algorithm

    def verify(self, token: str) -> Identity:
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                audience=self._audience,
            )
        except JWTError as e:
            logger.info(f"Token rejected: {e}")
            raise UnauthenticatedError("Invalid token")

        try:
            subject = UUID(str(claims.get("sub")))
        except ValueError:
            logger.info("Token rejected: subject is not a UUID")
            raise UnauthenticatedError("Invalid token")

        return Identity(subject_id=SubjectId(subject), email=claims.get("email"))
