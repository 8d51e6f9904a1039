from django.db import connections
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response


@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def healthz(request):
    with connections['default'].cursor() as c:
        c.execute('SELECT 1')
        row = c.fetchone()
    return Response({'ok': True, 'db': bool(row and row[0] == 1)})
