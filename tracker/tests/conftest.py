import pytest
from rest_framework.test import APIClient

from tracker.models import Medication, Profile, User
from tracker.services import tokens


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_user(db):
    def _make(email='owner@example.com', password='secret1', **extra):
        return User.objects.create_user(email=email, password=password, **extra)
    return _make


@pytest.fixture
def client_for():
    """Return an APIClient carrying a bearer token for ``user``."""
    def _client(user):
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f'Bearer {tokens.issue(user)}')
        return client
    return _client


@pytest.fixture
def owner(make_user):
    return make_user('owner@example.com')


@pytest.fixture
def intruder(make_user):
    return make_user('intruder@example.com')


@pytest.fixture
def profile(owner):
    return Profile.objects.create(user=owner, name='Mom')


@pytest.fixture
def medication(profile):
    return Medication.objects.create(profile=profile, name='Aspirin', dosage='100 mg', current_stock=3)
