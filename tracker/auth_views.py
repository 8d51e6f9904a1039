"""
Registration and login endpoints.

These views are public: they skip bearer authentication entirely so that a
stale token in the client does not block logging in again.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from tracker.serializers.auth import LoginSerializer, RegisterSerializer
from tracker.services import credentials, tokens

from .models import User


def serialize_user(user: User) -> dict:
    return {
        'id': user.id,
        'email': user.email,
        'name': user.name,
        'createdAt': user.created_at.isoformat() if user.created_at else None,
    }


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def register_view(request):
    """Create an account.  Body: ``email``, ``password``, optional ``name``."""
    s = RegisterSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    vd = s.validated_data
    user = credentials.register(vd['email'], vd['password'], vd.get('name'))
    return Response(
        {'message': 'User registered successfully.', 'user': serialize_user(user)},
        status=status.HTTP_201_CREATED,
    )


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def login_view(request):
    """Exchange email and password for an access token."""
    s = LoginSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    vd = s.validated_data
    user = credentials.verify_credentials(vd['email'], vd['password'], request=request._request)
    return Response({
        'message': 'Login successful.',
        'token': tokens.issue(user),
        'user': serialize_user(user),
    })
