"""
Bearer token authentication for Django REST framework.

Requests without an ``Authorization: Bearer`` header stay anonymous, so the
``IsAuthenticated`` permission answers 401 (the ``WWW-Authenticate`` header
returned by :meth:`authenticate_header` keeps DRF from downgrading it to
403).  A token that is present but unusable is rejected with 403.
"""
from __future__ import annotations

import logging

from rest_framework import authentication
from rest_framework_simplejwt.models import TokenUser

from .exceptions import TokenRejected
from .services import tokens
from .services.tokens import TokenErrorKind

logger = logging.getLogger(__name__)

REJECTIONS = {
    TokenErrorKind.INVALID: ('Invalid token.', 'token_invalid'),
    TokenErrorKind.EXPIRED: ('Token expired.', 'token_expired'),
    TokenErrorKind.MISSING_SUBJECT: ('Malformed token: no user id.', 'token_missing_subject'),
}


class BearerTokenAuthentication(authentication.BaseAuthentication):
    keyword = 'Bearer'

    def authenticate(self, request):
        auth = authentication.get_authorization_header(request).split()
        if not auth or auth[0].lower() != self.keyword.lower().encode():
            return None
        raw = auth[1].decode('utf-8', errors='replace') if len(auth) == 2 else None

        result = tokens.verify(raw)
        if result.error is TokenErrorKind.MISSING:
            return None
        if not result.ok:
            detail, code = REJECTIONS[result.error]
            logger.warning('Rejected bearer token on %s: %s', request.path, result.error.value)
            raise TokenRejected(detail=detail, code=code)
        return TokenUser(result.token), result.token

    def authenticate_header(self, request):
        return f'{self.keyword} realm="api"'
