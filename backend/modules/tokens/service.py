"""
Token service implementation.

Signs verification and password-reset tokens as JWTs with a shared secret.
"""

import logging
import re
import uuid
from datetime import datetime, timedelta, timezone

import jwt

from .interfaces import ITokenService, TokenLifetime
from .models import TokenClaims
from .exceptions import InvalidTokenError, ExpiredTokenError, InvalidTtlError

logger = logging.getLogger(__name__)

_TTL_PATTERN = re.compile(r"^\s*(\d+)\s*([smhdw])\s*$")

_TTL_UNITS = {
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
    "d": "days",
    "w": "weeks",
}


def parse_ttl(ttl: TokenLifetime) -> timedelta:
    """
    Convert a lifetime expression into a timedelta.

    Accepts "<count><unit>" where unit is one of s, m, h, d or w
    (e.g. "14d", "30m"), or a positive timedelta.
    """
    if isinstance(ttl, timedelta):
        if ttl <= timedelta(0):
            raise InvalidTtlError(str(ttl))
        return ttl

    match = _TTL_PATTERN.match(ttl or "")
    if not match or int(match.group(1)) == 0:
        raise InvalidTtlError(ttl)

    count, unit = match.groups()
    return timedelta(**{_TTL_UNITS[unit]: int(count)})


class TokenService(ITokenService):
    """
    JWT implementation of the token service.

    Every token carries a random jti, so minting twice for the same user
    always yields a different value.
    """

    def __init__(self, secret: str, algorithm: str = "HS256"):
        if not secret:
            raise RuntimeError(
                "Token configuration missing. Set the TOKEN_SECRET environment variable."
            )
        self._secret = secret
        self._algorithm = algorithm

    async def create_token(self, subject_id: str, email: str, ttl: TokenLifetime) -> str:
        lifetime = parse_ttl(ttl)
        now = datetime.now(timezone.utc)

        payload = {
            "sub": str(subject_id),
            "email": email,
            "iat": int(now.timestamp()),
            "exp": int((now + lifetime).timestamp()),
            "jti": uuid.uuid4().hex,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    async def decode_token(self, token: str) -> TokenClaims:
        if not token:
            raise InvalidTokenError("Token is missing.")

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "email", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(str(e))

        return TokenClaims(**payload)

    async def validate_token(self, token: str, email: str) -> bool:
        try:
            claims = await self.decode_token(token)
        except (InvalidTokenError, ExpiredTokenError) as e:
            logger.debug(f"Rejected token: {e.message}")
            return False

        return claims.email == email
