from io import StringIO

import pytest
from django.contrib.auth import authenticate
from django.core.management import call_command

from tracker.models import Medication, User

pytestmark = pytest.mark.django_db


def test_seed_demo_is_idempotent():
    out = StringIO()
    call_command('seed_demo', stdout=out)
    call_command('seed_demo', stdout=out)

    user = User.objects.get(email='demo@example.com')
    assert user.profiles.count() == 1
    assert Medication.objects.filter(profile__user=user).count() == 3
    assert authenticate(username='demo@example.com', password='secret1') == user
    assert 'ok: demo@example.com' in out.getvalue()


def test_seed_demo_restores_stock():
    call_command('seed_demo', stdout=StringIO())
    Medication.objects.filter(name='Aspirin').update(current_stock=0)
    call_command('seed_demo', '--password', 'other-pass', stdout=StringIO())
    assert Medication.objects.get(name='Aspirin').current_stock == 30
    assert authenticate(username='demo@example.com', password='other-pass') is not None
