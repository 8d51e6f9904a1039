import os
import runpy
import subprocess
import sys
from pathlib import Path

import pytest
from django.core.exceptions import ImproperlyConfigured
from django.urls import reverse

import medtrack

SETTINGS_PATH = Path(medtrack.__file__).resolve().parent / 'settings.py'


def test_missing_signing_key_is_fatal(monkeypatch):
    monkeypatch.delenv('JWT_SECRET', raising=False)
    with pytest.raises(ImproperlyConfigured):
        runpy.run_path(str(SETTINGS_PATH))


def test_blank_signing_key_is_fatal(monkeypatch):
    monkeypatch.setenv('JWT_SECRET', '   ')
    with pytest.raises(ImproperlyConfigured):
        runpy.run_path(str(SETTINGS_PATH))


def test_token_lifetime_is_configurable(monkeypatch):
    monkeypatch.setenv('JWT_SECRET', 'another-key')
    monkeypatch.setenv('JWT_ACCESS_TOKEN_HOURS', '2')
    ns = runpy.run_path(str(SETTINGS_PATH))
    assert ns['SIMPLE_JWT']['ACCESS_TOKEN_LIFETIME'].total_seconds() == 7200
    assert ns['SIMPLE_JWT']['SIGNING_KEY'] == 'another-key'


def test_prod_rejects_debug(monkeypatch):
    monkeypatch.setenv('JWT_SECRET', 'another-key')
    monkeypatch.setenv('ENV', 'prod')
    monkeypatch.setenv('DEBUG', '1')
    with pytest.raises(ImproperlyConfigured):
        runpy.run_path(str(SETTINGS_PATH))


@pytest.mark.django_db
def test_health_is_public(api_client):
    r = api_client.get(reverse('healthz'))
    assert r.status_code == 200
    assert r.data == {'ok': True, 'db': True}


@pytest.mark.django_db
def test_metrics_exposed(api_client):
    r = api_client.get('/metrics')
    assert r.status_code == 200
    assert b'django_http_requests' in r.content


def test_app_starts_in_fresh_interpreter():
    # the test process has already imported everything; a new one sees the
    # import order of a real start (admin autodiscover first)
    code = (
        'import django; django.setup(); '
        'from rest_framework.settings import api_settings; '
        'print(api_settings.DEFAULT_AUTHENTICATION_CLASSES[0].__name__, '
        'api_settings.EXCEPTION_HANDLER.__name__)'
    )
    env = dict(os.environ, DJANGO_SETTINGS_MODULE='medtrack.settings_test')
    proc = subprocess.run(
        [sys.executable, '-c', code],
        cwd=SETTINGS_PATH.parent.parent,
        env=env,
        capture_output=True,
        text=True,
        timeout=120,
    )
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout.split() == ['BearerTokenAuthentication', 'api_exception_handler']
