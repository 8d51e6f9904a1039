"""
Medication endpoints.

Every handler passes the caller's user id down to the service layer, which
checks the profile/medication ownership chain before reading or writing.
Stock is only ever changed through the inventory service's atomic updates.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from tracker.models import Medication
from tracker.serializers.medication import (
    MedicationCreateSerializer,
    MedicationListQuerySerializer,
    RestockSerializer,
)
from tracker.services import medications as medication_service
from tracker.services.inventory import is_low_stock


def _serialize(med: Medication) -> dict:
    return {
        'id': med.id,
        'profileId': med.profile_id,
        'name': med.name,
        'dosage': med.dosage,
        'currentStock': med.current_stock,
        'lowStockThreshold': med.low_stock_threshold,
        'isLowStock': is_low_stock(med),
        'takeTime': med.take_time,
        'frequency': med.frequency,
        'notes': med.notes,
        'createdAt': med.created_at.isoformat() if med.created_at else None,
        'updatedAt': med.updated_at.isoformat() if med.updated_at else None,
    }


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def medications_list(request):
    user_id = request.user.id
    if request.method == 'GET':
        q = MedicationListQuerySerializer(data=request.query_params)
        q.is_valid(raise_exception=True)
        meds = medication_service.list_medications(q.validated_data['profileId'], user_id)
        return Response([_serialize(m) for m in meds])
    # POST
    s = MedicationCreateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    vd = s.validated_data
    med = medication_service.create_medication(user_id, {
        'profile_id': vd['profileId'],
        'name': vd['name'],
        'current_stock': vd['currentStock'],
        'low_stock_threshold': vd['lowStockThreshold'],
        'dosage': vd.get('dosage'),
        'take_time': vd.get('takeTime'),
        'frequency': vd.get('frequency'),
        'notes': vd.get('notes'),
    })
    return Response(_serialize(med), status=status.HTTP_201_CREATED)


@api_view(['GET', 'DELETE'])
@permission_classes([IsAuthenticated])
def medication_detail(request, pk: int):
    user_id = request.user.id
    if request.method == 'GET':
        return Response(_serialize(medication_service.get_medication(pk, user_id)))
    # DELETE
    medication_service.delete_medication(pk, user_id)
    return Response(status=status.HTTP_204_NO_CONTENT)


@api_view(['PATCH'])
@permission_classes([IsAuthenticated])
def medication_taken(request, pk: int):
    """Record one dose taken; 400 ``out_of_stock`` when nothing is left."""
    med = medication_service.mark_taken(pk, request.user.id)
    return Response(_serialize(med))


@api_view(['PATCH'])
@permission_classes([IsAuthenticated])
def medication_restock(request, pk: int):
    s = RestockSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    med = medication_service.restock_medication(pk, request.user.id, s.validated_data['quantity'])
    return Response(_serialize(med))
