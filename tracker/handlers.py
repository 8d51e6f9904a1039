"""
Unified API exception handler.

Every error leaves the API as ``{"ok": false, "error": {"code", "message"}}``.
This module imports ``rest_framework.views``, which loads the configured
authentication classes; neither :mod:`tracker.exceptions` nor
:mod:`tracker.authentication` may import it.
"""
from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler, set_rollback

from .exceptions import InvalidInput

logger = logging.getLogger(__name__)


def _error_code(exc, status_code: int) -> str:
    if not isinstance(exc, APIException):
        # Http404 / PermissionDenied converted by DRF
        return 'not_found' if status_code == 404 else 'permission_denied'
    codes = exc.get_codes()
    if isinstance(codes, str):
        return codes
    # field-level validation errors
    return InvalidInput.default_code if status_code == 400 else exc.default_code


def api_exception_handler(exc, context):
    resp = drf_exception_handler(exc, context)
    if resp is None:
        request = context.get('request')
        view = context.get('view')
        set_rollback()
        logger.exception(
            'Unhandled error in %s (kwargs=%s, user_id=%s)',
            type(view).__name__ if view else 'unknown',
            context.get('kwargs'),
            getattr(getattr(request, 'user', None), 'id', None),
        )
        return Response(
            {'ok': False, 'error': {'code': 'server_error', 'message': 'Internal server error.'}},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    # normalize response
    if isinstance(resp.data, dict) and 'detail' in resp.data:
        message = resp.data['detail']
    else:
        message = resp.data
    resp.data = {'ok': False, 'error': {'code': _error_code(exc, resp.status_code), 'message': message}}
    return resp
