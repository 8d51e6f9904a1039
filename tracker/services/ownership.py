"""
Ownership checks for the User -> Profile -> Medication chain.

Every protected view goes through this module before reading or mutating a
profile or medication.  Ownership is resolved with a fresh query each time;
ids arriving from clients (path segments, query strings, JSON bodies) are
never trusted.  Failure is reported as ``NotFound`` so that other users'
resources are indistinguishable from missing ones.
"""
from __future__ import annotations

import logging
from typing import Optional

from rest_framework.exceptions import NotFound

from tracker.models import Medication, Profile

logger = logging.getLogger(__name__)

# signed 64-bit primary keys
MAX_ID = 2 ** 63 - 1


def _as_id(value) -> Optional[int]:
    """Coerce an untrusted id to a positive int, or None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and not value.is_integer():
        return None
    try:
        ident = int(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return ident if 0 < ident <= MAX_ID else None


def owns_profile(profile_id, user_id) -> bool:
    pid, uid = _as_id(profile_id), _as_id(user_id)
    if pid is None or uid is None:
        return False
    return Profile.objects.filter(pk=pid, user_id=uid).exists()


def owns_medication(medication_id, user_id) -> bool:
    mid, uid = _as_id(medication_id), _as_id(user_id)
    if mid is None or uid is None:
        return False
    return Medication.objects.filter(pk=mid, profile__user_id=uid).exists()


def get_owned_profile(profile_id, user_id) -> Profile:
    pid, uid = _as_id(profile_id), _as_id(user_id)
    profile = None
    if pid is not None and uid is not None:
        profile = Profile.objects.filter(pk=pid, user_id=uid).first()
    if profile is None:
        logger.warning('Profile %s not found or not owned by user %s', profile_id, user_id)
        raise NotFound('Profile not found.')
    return profile


def get_owned_medication(medication_id, user_id) -> Medication:
    mid, uid = _as_id(medication_id), _as_id(user_id)
    medication = None
    if mid is not None and uid is not None:
        medication = Medication.objects.filter(pk=mid, profile__user_id=uid).first()
    if medication is None:
        logger.warning('Medication %s not found or not owned by user %s', medication_id, user_id)
        raise NotFound('Medication not found.')
    return medication
