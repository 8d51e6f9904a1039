import time

import jwt
import pytest
from django.conf import settings
from django.urls import reverse
from rest_framework.test import APIClient

from tracker.services import tokens
from tracker.services.tokens import TokenErrorKind

pytestmark = pytest.mark.django_db


def _encode(payload, key=None):
    return jwt.encode(payload, key or settings.SIMPLE_JWT['SIGNING_KEY'], algorithm='HS256')


def _claims(**extra):
    payload = {'token_type': 'access', 'jti': 'a1b2c3', 'exp': int(time.time()) + 3600}
    payload.update(extra)
    return payload


def test_issued_token_round_trips_user_id(owner):
    result = tokens.verify(tokens.issue(owner))
    assert result.ok
    assert result.user_id == owner.id


def test_issued_token_expires_after_24_hours(owner):
    raw = tokens.issue(owner)
    payload = jwt.decode(raw, settings.SIMPLE_JWT['SIGNING_KEY'], algorithms=['HS256'])
    lifetime = payload['exp'] - payload['iat']
    assert lifetime == 24 * 60 * 60
    assert str(payload['userId']) == str(owner.id)


def test_missing_token():
    assert tokens.verify(None).error is TokenErrorKind.MISSING
    assert tokens.verify('').error is TokenErrorKind.MISSING


def test_malformed_token_is_invalid():
    assert tokens.verify('not.a.token').error is TokenErrorKind.INVALID


def test_foreign_signature_is_invalid(owner):
    raw = _encode(_claims(userId=owner.id), key='some-other-signing-key-of-decent-length')
    assert tokens.verify(raw).error is TokenErrorKind.INVALID


def test_expired_token(owner):
    raw = _encode(_claims(userId=owner.id, exp=int(time.time()) - 60))
    assert tokens.verify(raw).error is TokenErrorKind.EXPIRED


def test_token_without_subject(owner):
    raw = _encode(_claims())
    assert tokens.verify(raw).error is TokenErrorKind.MISSING_SUBJECT


def test_string_user_claim_is_read_as_int(owner):
    result = tokens.verify(_encode(_claims(userId=str(owner.id))))
    assert result.ok
    assert result.user_id == owner.id
    assert isinstance(result.user_id, int)


@pytest.mark.parametrize('claim', ['abc', '', '0', '-3', True])
def test_non_numeric_user_claim_is_invalid(claim):
    assert tokens.verify(_encode(_claims(userId=claim))).error is TokenErrorKind.INVALID


def test_user_id_is_an_int_in_responses(owner):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {_encode(_claims(userId=str(owner.id)))}")
    created = client.post(reverse('profiles_list'), {'name': 'Mom'}, format='json')
    assert created.status_code == 201
    fetched = client.get(reverse('profile_detail', args=[created.data['id']]))
    assert created.data['userId'] == fetched.data['userId'] == owner.id
    assert isinstance(created.data['userId'], int)


def test_no_header_is_401():
    r = APIClient().get(reverse('profiles_list'))
    assert r.status_code == 401
    assert r['WWW-Authenticate'].startswith('Bearer')


def test_non_bearer_scheme_is_401(owner):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f'Token {tokens.issue(owner)}')
    assert client.get(reverse('profiles_list')).status_code == 401


@pytest.mark.parametrize('make_raw, code', [
    (lambda user: 'garbage', 'token_invalid'),
    (lambda user: _encode(_claims(userId=user.id, exp=int(time.time()) - 5)), 'token_expired'),
    (lambda user: _encode(_claims()), 'token_missing_subject'),
])
def test_rejected_tokens_are_403(owner, make_raw, code):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {make_raw(owner)}')
    r = client.get(reverse('profiles_list'))
    assert r.status_code == 403
    assert r.data['error']['code'] == code


def test_valid_token_authenticates(owner, client_for):
    r = client_for(owner).get(reverse('profiles_list'))
    assert r.status_code == 200
    assert r.data == []
