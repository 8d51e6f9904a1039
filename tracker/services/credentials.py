"""
Account registration and credential checks.

Passwords go through Django's password hashers (salted, one-way).  Neither
the plaintext nor the hash is ever logged or returned to callers.
"""
from __future__ import annotations

import logging
from typing import Optional

from django.contrib.auth import authenticate, get_user_model
from django.db import IntegrityError, transaction

from tracker.exceptions import AuthFailure, Conflict, InvalidInput

logger = logging.getLogger(__name__)

User = get_user_model()

MIN_PASSWORD_LENGTH = 6


def normalize_email(email: str) -> str:
    """Addresses are stored and matched in lower case."""
    return (email or '').strip().lower()


def register(email: str, password: str, name: Optional[str] = None):
    if not email or not password:
        raise InvalidInput('Email and password are required.')
    if len(password) < MIN_PASSWORD_LENGTH:
        raise InvalidInput(f'Password must be at least {MIN_PASSWORD_LENGTH} characters.')

    email = normalize_email(email)
    if User.objects.filter(email=email).exists():
        logger.info('Registration refused: email already registered')
        raise Conflict('Email is already registered.')
    try:
        with transaction.atomic():
            user = User.objects.create_user(email=email, password=password, name=name or None)
    except IntegrityError:
        # lost a race with a concurrent registration for the same email
        raise Conflict('Email is already registered.')
    logger.info('Registered user %s', user.id)
    return user


def verify_credentials(email: str, password: str, request=None):
    """Return the user for valid credentials, else raise ``AuthFailure``.

    Unknown email and wrong password raise the same error.
    """
    user = authenticate(request, username=normalize_email(email), password=password)
    if user is None:
        logger.info('Login failed')
        raise AuthFailure()
    logger.info('Login succeeded for user %s', user.id)
    return user
