"""
Profile endpoints.

A profile is visible only to the user who created it; any other caller
gets the same 404 as for an id that does not exist.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from tracker.models import Profile
from tracker.serializers.profile import ProfileCreateSerializer
from tracker.services import profiles as profile_service


def _serialize(profile: Profile) -> dict:
    return {
        'id': profile.id,
        'userId': profile.user_id,
        'name': profile.name,
        'createdAt': profile.created_at.isoformat() if profile.created_at else None,
    }


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def profiles_list(request):
    user_id = request.user.id
    if request.method == 'GET':
        return Response([_serialize(p) for p in profile_service.list_profiles(user_id)])
    # POST
    s = ProfileCreateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    profile = profile_service.create_profile(user_id, s.validated_data['name'])
    return Response(_serialize(profile), status=status.HTTP_201_CREATED)


@api_view(['GET', 'DELETE'])
@permission_classes([IsAuthenticated])
def profile_detail(request, pk: int):
    user_id = request.user.id
    if request.method == 'GET':
        return Response(_serialize(profile_service.get_profile(pk, user_id)))
    # DELETE
    profile_service.delete_profile(pk, user_id)
    return Response(status=status.HTTP_204_NO_CONTENT)
