import pytest
from django.urls import reverse

from tracker.models import Medication, Profile

pytestmark = pytest.mark.django_db


def test_create_then_get_round_trip(owner, client_for):
    client = client_for(owner)
    r = client.post(reverse('profiles_list'), {'name': 'Mom'}, format='json')
    assert r.status_code == 201
    created = r.data
    assert created['name'] == 'Mom'
    assert created['userId'] == owner.id

    r = client.get(reverse('profile_detail', args=[created['id']]))
    assert r.status_code == 200
    assert r.data['id'] == created['id']
    assert r.data['name'] == 'Mom'


def test_name_is_trimmed(owner, client_for):
    r = client_for(owner).post(reverse('profiles_list'), {'name': '  Dad  '}, format='json')
    assert r.status_code == 201
    assert r.data['name'] == 'Dad'


@pytest.mark.parametrize('body', [{}, {'name': ''}, {'name': '   '}, {'name': '<b></b>'}])
def test_empty_name_is_rejected(owner, client_for, body):
    r = client_for(owner).post(reverse('profiles_list'), body, format='json')
    assert r.status_code == 400
    assert r.data['error']['code'] == 'invalid_input'
    assert not Profile.objects.exists()


def test_markup_is_stripped_from_name(owner, client_for):
    r = client_for(owner).post(reverse('profiles_list'), {'name': '<script>x</script>Grandpa'}, format='json')
    assert r.status_code == 201
    assert '<script>' not in r.data['name']


def test_list_returns_only_own_profiles_in_creation_order(owner, intruder, client_for):
    Profile.objects.create(user=owner, name='First')
    Profile.objects.create(user=intruder, name='Not mine')
    Profile.objects.create(user=owner, name='Second')
    r = client_for(owner).get(reverse('profiles_list'))
    assert r.status_code == 200
    assert [p['name'] for p in r.data] == ['First', 'Second']


def test_get_unknown_profile_is_404(owner, client_for):
    r = client_for(owner).get(reverse('profile_detail', args=[424242]))
    assert r.status_code == 404
    assert r.data['error']['code'] == 'not_found'


def test_delete_profile_removes_its_medications(owner, profile, medication, client_for):
    client = client_for(owner)
    r = client.delete(reverse('profile_detail', args=[profile.id]))
    assert r.status_code == 204
    assert client.get(reverse('profile_detail', args=[profile.id])).status_code == 404
    assert not Medication.objects.filter(pk=medication.pk).exists()


@pytest.mark.parametrize('name', ['Tom & Jerry', 'Ana <3', "O'Brien", 'a < b > c'])
def test_plain_text_names_round_trip(owner, client_for, name):
    client = client_for(owner)
    created = client.post(reverse('profiles_list'), {'name': name}, format='json')
    assert created.status_code == 201
    assert created.data['name'] == name
    fetched = client.get(reverse('profile_detail', args=[created.data['id']]))
    assert fetched.data['name'] == name
    assert Profile.objects.get(pk=created.data['id']).name == name
