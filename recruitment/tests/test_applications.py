"""
Recruitment intake tests.
"""

import uuid

import pytest
from rest_framework import status

from recruitment import services
from recruitment.models import HeroApplication


def application_payload(**overrides):
    payload = {
        'name': 'Vasile Ionescu',
        'email': 'vasile@example.com',
        'phone': '0733000000',
        'category': 'Electrician',
        'message': 'I can fix anything with a wire in it.',
    }
    payload.update(overrides)
    return payload


@pytest.mark.django_db
class TestApply:

    def test_application_is_stored(self, api_client):
        response = api_client.post('/api/apply-hero', application_payload(), format='json')

        assert response.status_code == status.HTTP_200_OK
        application = HeroApplication.objects.get(pk=response.data['id'])
        assert application.category == 'Electrician'

    def test_notifies_headquarters_and_applicant(self, api_client, mailoutbox):
        api_client.post('/api/apply-hero', application_payload(), format='json')

        sent = {m.extra_headers['X-Notification-Theme']: m for m in mailoutbox}
        assert set(sent) == {'application_admin', 'application_received'}
        assert sent['application_admin'].to == ['hq@superfix.test']
        assert 'I can fix anything with a wire in it.' in sent['application_admin'].body
        assert sent['application_received'].to == ['vasile@example.com']

    def test_missing_message_is_marked(self, api_client, mailoutbox):
        api_client.post('/api/apply-hero', application_payload(message=''), format='json')

        admin_mail = next(
            m for m in mailoutbox if m.extra_headers['X-Notification-Theme'] == 'application_admin'
        )
        assert 'No message' in admin_mail.body

    def test_invalid_email_is_rejected(self, api_client):
        response = api_client.post('/api/apply-hero', application_payload(email='nope'), format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert HeroApplication.objects.count() == 0


@pytest.mark.django_db
class TestApplicationAdmin:

    def test_list_requires_admin(self, api_client, hero_client):
        assert api_client.get('/api/admin/applications').status_code == status.HTTP_401_UNAUTHORIZED
        assert hero_client.get('/api/admin/applications').status_code == status.HTTP_403_FORBIDDEN

    def test_list_returns_applications(self, admin_client, application_factory):
        application = application_factory()

        response = admin_client.get('/api/admin/applications')

        assert response.status_code == status.HTTP_200_OK
        assert [a['id'] for a in response.data] == [str(application.pk)]

    def test_reject_notifies_and_deletes(self, admin_client, application_factory, mailoutbox):
        application = application_factory(name='Mihai')

        response = admin_client.delete(f'/api/admin/applications/{application.pk}')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        assert not HeroApplication.objects.exists()
        assert [m.extra_headers['X-Notification-Theme'] for m in mailoutbox] == ['application_rejected']
        assert mailoutbox[0].to == [application.email]
        assert 'Hi Mihai' in mailoutbox[0].body

    def test_reject_converted_applicant_is_silent(self, admin_client, application_factory, hero_factory, mailoutbox):
        application = application_factory()
        hero_factory(email=application.email)

        admin_client.delete(f'/api/admin/applications/{application.pk}')

        assert not HeroApplication.objects.exists()
        assert mailoutbox == []

    def test_reject_unknown_id_still_succeeds(self, admin_client, mailoutbox):
        response = admin_client.delete(f'/api/admin/applications/{uuid.uuid4()}')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        assert mailoutbox == []

    def test_reject_malformed_id_still_succeeds(self, admin_client):
        response = admin_client.delete('/api/admin/applications/not-a-uuid')

        assert response.status_code == status.HTTP_200_OK

    def test_delivery_failure_does_not_block_deletion(self, application_factory, monkeypatch):
        def refuse(self, fail_silently=False):
            raise OSError('smtp down')

        monkeypatch.setattr('django.core.mail.EmailMultiAlternatives.send', refuse)
        application = application_factory()

        assert services.reject_application(application.pk) is True
        assert not HeroApplication.objects.exists()
