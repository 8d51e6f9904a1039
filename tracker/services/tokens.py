"""
Access token issuance and verification.

Tokens are simplejwt ``AccessToken`` instances signed with ``JWT_SECRET``.
They carry the user id in the ``userId`` claim and expire after
``SIMPLE_JWT['ACCESS_TOKEN_LIFETIME']`` (24 hours by default).

``verify`` never raises: it returns a :class:`TokenResult` that is either
ok (with the user id) or tagged with a :class:`TokenErrorKind`.  The HTTP
layer decides the status code from the tag.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Optional

import jwt
from django.conf import settings
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken

logger = logging.getLogger(__name__)


class TokenErrorKind(str, enum.Enum):
    MISSING = 'missing'
    INVALID = 'invalid'
    EXPIRED = 'expired'
    MISSING_SUBJECT = 'missing_subject'


@dataclass(frozen=True)
class TokenResult:
    user_id: Optional[int] = None
    token: Optional[AccessToken] = None
    error: Optional[TokenErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def issue(user) -> str:
    """Return a signed access token for ``user``."""
    return str(AccessToken.for_user(user))


def _classify(raw: str) -> TokenErrorKind:
    """Tell an expired token apart from one that is simply bad."""
    try:
        jwt.decode(raw, settings.SIMPLE_JWT['SIGNING_KEY'], algorithms=[api_settings.ALGORITHM])
    except jwt.ExpiredSignatureError:
        return TokenErrorKind.EXPIRED
    except jwt.InvalidTokenError:
        return TokenErrorKind.INVALID
    # signature fine but simplejwt refused it (wrong type, no jti, ...)
    return TokenErrorKind.INVALID


def _as_user_id(value) -> Optional[int]:
    # simplejwt writes the claim as a string; older releases kept the int
    if isinstance(value, bool):
        return None
    try:
        user_id = int(value)
    except (TypeError, ValueError):
        return None
    return user_id if user_id > 0 else None


def verify(raw: Optional[str]) -> TokenResult:
    if not raw:
        return TokenResult(error=TokenErrorKind.MISSING)
    try:
        token = AccessToken(raw)
    except TokenError:
        return TokenResult(error=_classify(raw))
    claim = token.get(api_settings.USER_ID_CLAIM)
    if claim is None:
        return TokenResult(error=TokenErrorKind.MISSING_SUBJECT)
    user_id = _as_user_id(claim)
    if user_id is None:
        return TokenResult(error=TokenErrorKind.INVALID)
    # downstream code (TokenUser.id) reads the claim back from the token
    token[api_settings.USER_ID_CLAIM] = user_id
    return TokenResult(user_id=user_id, token=token)
