"""Anti-forgery tokens signed with one shared secret.

Tokens are not bound to a session or client: any token signed with the
process secret is accepted until it expires (if an expiry is configured).
"""

import logging
import secrets

from itsdangerous import BadData, URLSafeTimedSerializer

from ..errors import InvalidAntiForgeryToken

logger = logging.getLogger(__name__)

_SALT = "csrf-token"


class CsrfGuard:
    def __init__(self, secret: str, enabled: bool = True, max_age: int | None = None):
        self.enabled = enabled
        self.max_age = max_age
        self._serializer = URLSafeTimedSerializer(secret, salt=_SALT)

    def issue_token(self) -> str:
        """Sign a fresh random nonce with the shared secret."""
        return self._serializer.dumps(secrets.token_urlsafe(16))

    def verify_token(self, candidate: str | None) -> bool:
        """True iff ``candidate`` was signed with the shared secret and has not expired."""
        if not candidate or not isinstance(candidate, str):
            return False
        try:
            self._serializer.loads(candidate, max_age=self.max_age)
        except BadData:
            return False
        return True

    def enforce(self, candidate: str | None) -> None:
        """Raise InvalidAntiForgeryToken when enabled and the candidate does not verify."""
        if not self.enabled:
            return
        if not self.verify_token(candidate):
            logger.warning("Rejected write with invalid anti-forgery token")
            raise InvalidAntiForgeryToken()
