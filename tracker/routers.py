"""
URL mappings for the medication tracker API.

Trailing slashes are deliberately omitted; the front-end calls the paths
exactly as written here.
"""
from django.urls import path, include

from .auth_views import login_view, register_view
from .views import health
from .views.medications import (
    medication_detail,
    medication_restock,
    medication_taken,
    medications_list,
)
from .views.profiles import profile_detail, profiles_list


urlpatterns = [
    # Prometheus exposition at /metrics
    path('', include('django_prometheus.urls')),
    path('api/health', health.healthz, name='healthz'),
    # Authentication
    path('api/auth/register', register_view, name='register_view'),
    path('api/auth/login', login_view, name='login_view'),
    # Profiles
    path('api/profiles', profiles_list, name='profiles_list'),
    path('api/profiles/<int:pk>', profile_detail, name='profile_detail'),
    # Medications
    path('api/medications', medications_list, name='medications_list'),
    path('api/medications/<int:pk>', medication_detail, name='medication_detail'),
    path('api/medications/<int:pk>/taken', medication_taken, name='medication_taken'),
    path('api/medications/<int:pk>/restock', medication_restock, name='medication_restock'),
]
