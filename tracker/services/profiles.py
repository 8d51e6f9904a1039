"""
Profile operations scoped to the authenticated user.
"""
from __future__ import annotations

import logging

from django.db.models import QuerySet

from tracker.exceptions import InvalidInput
from tracker.models import Profile
from tracker.services.ownership import get_owned_profile

logger = logging.getLogger(__name__)


def list_profiles(user_id: int) -> QuerySet[Profile]:
    return Profile.objects.filter(user_id=user_id).order_by('created_at', 'id')


def create_profile(user_id: int, name: str) -> Profile:
    name = (name or '').strip()
    if not name:
        raise InvalidInput('Profile name is required.')
    profile = Profile.objects.create(user_id=user_id, name=name)
    logger.info('Created profile %s for user %s', profile.id, user_id)
    return profile


def get_profile(profile_id, user_id: int) -> Profile:
    return get_owned_profile(profile_id, user_id)


def delete_profile(profile_id, user_id: int) -> None:
    """Delete an owned profile together with its medications."""
    profile = get_owned_profile(profile_id, user_id)
    pk = profile.pk
    profile.delete()
    logger.info('Deleted profile %s for user %s', pk, user_id)
