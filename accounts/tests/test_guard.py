"""
Identity & Access Guard Tests

Tests for the bearer-token guard:
- Missing credential -> 401
- Malformed, tampered or expired credential -> 403
- Valid credential with the wrong role -> 403
- Public endpoints ignore credentials entirely
"""

from dataclasses import FrozenInstanceError
from datetime import timedelta

import pytest
from rest_framework import status
from rest_framework.test import APIClient

from accounts.authentication import Principal, RoleAccessToken

ADMIN_ENDPOINT = '/api/admin/applications'
HERO_ENDPOINT = '/api/hero/my-missions'


def client_with_header(value):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=value)
    return client


@pytest.mark.django_db
class TestMissingCredential:

    def test_admin_endpoint_without_token_is_401(self, api_client):
        response = api_client.get(ADMIN_ENDPOINT)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['success'] is False
        assert response.data['error_code'] == 'AUTHENTICATION_MISSING'

    def test_hero_endpoint_without_token_is_401(self, api_client):
        response = api_client.get(HERO_ENDPOINT)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestInvalidCredential:

    def test_header_without_token_is_403(self):
        response = client_with_header('Bearer').get(ADMIN_ENDPOINT)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data['error_code'] == 'AUTHENTICATION_INVALID'

    def test_unknown_scheme_is_403(self):
        response = client_with_header('Basic YWRtaW46YWRtaW4=').get(ADMIN_ENDPOINT)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data['error_code'] == 'AUTHENTICATION_INVALID'

    def test_garbage_token_is_403(self):
        response = client_with_header('Bearer not-a-jwt').get(ADMIN_ENDPOINT)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_tampered_signature_is_403(self, admin_token):
        header, payload, _signature = admin_token.split('.')
        tampered = f'{header}.{payload}.invalidsignature'

        response = client_with_header(f'Bearer {tampered}').get(ADMIN_ENDPOINT)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_expired_token_is_403(self, admin_account):
        token = RoleAccessToken.for_subject(admin_account.pk, 'ADMIN', timedelta(seconds=-5))

        response = client_with_header(f'Bearer {token}').get(ADMIN_ENDPOINT)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data['error_code'] == 'AUTHENTICATION_INVALID'

    def test_unknown_role_is_403(self, admin_account):
        token = RoleAccessToken.for_subject(admin_account.pk, 'GUEST', timedelta(hours=1))

        response = client_with_header(f'Bearer {token}').get(ADMIN_ENDPOINT)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data['error_code'] == 'AUTHENTICATION_INVALID'


@pytest.mark.django_db
class TestRoleChecks:

    def test_hero_token_on_admin_endpoint_is_403(self, hero_client):
        response = hero_client.get(ADMIN_ENDPOINT)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data['error_code'] == 'AUTHORIZATION_DENIED'
        assert response.data['meta']['required_role'] == 'ADMIN'

    def test_admin_token_on_hero_endpoint_is_403(self, admin_client):
        response = admin_client.get(HERO_ENDPOINT)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data['error_code'] == 'AUTHORIZATION_DENIED'

    def test_matching_roles_pass(self, admin_client, hero_client):
        assert admin_client.get(ADMIN_ENDPOINT).status_code == status.HTTP_200_OK
        assert hero_client.get(HERO_ENDPOINT).status_code == status.HTTP_200_OK


@pytest.mark.django_db
class TestPublicEndpoints:

    def test_stale_token_does_not_block_directory(self, hero):
        response = client_with_header('Bearer expired-or-garbage').get('/api/heroes')

        assert response.status_code == status.HTTP_200_OK

    def test_stale_token_does_not_block_request_submission(self, hero):
        response = client_with_header('Bearer expired-or-garbage').post('/api/request', {
            'hero_id': str(hero.pk),
            'client_name': 'Ion',
            'client_phone': '0711111111',
            'description': 'Leaking tap',
        }, format='json')

        assert response.status_code == status.HTTP_200_OK


class TestTokens:

    def test_hero_token_carries_alias_and_role(self, hero):
        token = RoleAccessToken(str(RoleAccessToken.for_hero(hero)))

        assert token['role'] == 'HERO'
        assert token['user_id'] == str(hero.pk)
        assert token['alias'] == hero.alias

    def test_token_lifetimes(self, hero, admin_account):
        hero_token = RoleAccessToken.for_hero(hero)
        admin_token = RoleAccessToken.for_admin(admin_account)

        assert hero_token['exp'] - hero_token['iat'] == int(timedelta(days=7).total_seconds())
        assert admin_token['exp'] - admin_token['iat'] == int(timedelta(hours=24).total_seconds())

    def test_principal_is_immutable(self):
        principal = Principal(subject_id='abc', role='HERO', alias='Captain')

        assert principal.is_authenticated
        assert principal.is_hero and not principal.is_admin
        with pytest.raises(FrozenInstanceError):
            principal.role = 'ADMIN'
