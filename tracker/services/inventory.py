"""
Stock mutations for medications.

All changes to ``current_stock`` are single conditional ``UPDATE``
statements built from ``F()`` expressions, so the database serialises
concurrent requests.  Nothing here reads the stock into Python, changes it
and writes it back.

Callers are expected to have checked ownership first (see
:mod:`tracker.services.ownership`).
"""
from __future__ import annotations

import logging

from django.db.models import F
from django.utils import timezone
from rest_framework.exceptions import NotFound

from tracker.exceptions import InvalidInput, OutOfStock
from tracker.models import Medication

logger = logging.getLogger(__name__)


def decrement_on_taken(medication_id: int) -> Medication:
    """Take one dose: stock goes down by exactly one, never below zero.

    Raises ``OutOfStock`` when the stock is already zero (nothing is
    written) and ``NotFound`` when the medication does not exist.
    """
    updated = Medication.objects.filter(pk=medication_id, current_stock__gt=0).update(
        current_stock=F('current_stock') - 1,
        updated_at=timezone.now(),
    )
    if not updated:
        if not Medication.objects.filter(pk=medication_id).exists():
            raise NotFound('Medication not found.')
        logger.info('Medication %s is out of stock', medication_id)
        raise OutOfStock()
    medication = Medication.objects.get(pk=medication_id)
    logger.info('Dose taken for medication %s, stock now %s', medication_id, medication.current_stock)
    return medication


def restock(medication_id: int, quantity) -> Medication:
    """Add ``quantity`` units to the stock.

    The stock never exceeds ``Medication.MAX_STOCK``; a restock that would
    go past it raises ``InvalidInput`` and writes nothing.
    """
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        raise InvalidInput('quantity must be a positive integer.')
    if quantity > Medication.MAX_STOCK:
        raise InvalidInput('quantity is too large.')
    updated = Medication.objects.filter(
        pk=medication_id, current_stock__lte=Medication.MAX_STOCK - quantity
    ).update(
        current_stock=F('current_stock') + quantity,
        updated_at=timezone.now(),
    )
    if not updated:
        if not Medication.objects.filter(pk=medication_id).exists():
            raise NotFound('Medication not found.')
        raise InvalidInput('Restock would exceed the maximum stock.')
    medication = Medication.objects.get(pk=medication_id)
    logger.info('Restocked medication %s by %s, stock now %s', medication_id, quantity, medication.current_stock)
    return medication


def is_low_stock(medication: Medication) -> bool:
    """Informational signal only; never blocks a write."""
    return medication.current_stock <= medication.low_stock_threshold
