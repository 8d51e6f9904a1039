"""
Domain errors raised by the services and the authentication class.

Ownership failures are reported with DRF's ``NotFound`` so that resources
owned by someone else look exactly like resources that do not exist.  The
response envelope is built in :mod:`tracker.handlers`.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.exceptions import APIException


class InvalidInput(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid input.'
    default_code = 'invalid_input'


class OutOfStock(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'No stock available for this medication.'
    default_code = 'out_of_stock'


class AuthFailure(APIException):
    """Login rejected.  Same body for unknown email and wrong password."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = 'Invalid credentials.'
    default_code = 'invalid_credentials'


class TokenRejected(APIException):
    """A bearer token was presented but cannot be accepted."""
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'Invalid or expired token.'
    default_code = 'token_invalid'


class Conflict(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Resource already exists.'
    default_code = 'conflict'
