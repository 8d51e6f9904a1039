"""
Medication operations scoped to the authenticated user.

Each function resolves ownership through :mod:`tracker.services.ownership`
before touching data.  Stock changes are delegated to
:mod:`tracker.services.inventory`.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping

from django.db.models import QuerySet

from tracker.models import Medication
from tracker.services import inventory
from tracker.services.ownership import get_owned_medication, get_owned_profile

logger = logging.getLogger(__name__)


def list_medications(profile_id, user_id: int) -> QuerySet[Medication]:
    profile = get_owned_profile(profile_id, user_id)
    return Medication.objects.filter(profile=profile).order_by('name', 'id')


def create_medication(user_id: int, data: Mapping[str, Any]) -> Medication:
    """Create a medication under an owned profile.

    ``data`` holds validated fields keyed by model field name.
    """
    profile = get_owned_profile(data.get('profile_id'), user_id)
    medication = Medication.objects.create(
        profile=profile,
        name=data['name'],
        dosage=data.get('dosage'),
        current_stock=data['current_stock'],
        low_stock_threshold=data.get('low_stock_threshold', Medication.DEFAULT_LOW_STOCK_THRESHOLD),
        take_time=data.get('take_time'),
        frequency=data.get('frequency'),
        notes=data.get('notes'),
    )
    logger.info('Created medication %s for profile %s (user %s)', medication.id, profile.id, user_id)
    return medication


def get_medication(medication_id, user_id: int) -> Medication:
    return get_owned_medication(medication_id, user_id)


def mark_taken(medication_id, user_id: int) -> Medication:
    medication = get_owned_medication(medication_id, user_id)
    return inventory.decrement_on_taken(medication.pk)


def restock_medication(medication_id, user_id: int, quantity: int) -> Medication:
    medication = get_owned_medication(medication_id, user_id)
    return inventory.restock(medication.pk, quantity)


def delete_medication(medication_id, user_id: int) -> None:
    medication = get_owned_medication(medication_id, user_id)
    pk = medication.pk
    medication.delete()
    logger.info('Deleted medication %s for user %s', pk, user_id)
