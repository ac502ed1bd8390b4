"""
End-to-end workflow through the public API.
"""

import pytest
from rest_framework.test import APIClient


def bearer(token):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
    return client


@pytest.mark.workflow
@pytest.mark.django_db
def test_recruit_serve_review_and_rename(admin_client, mailoutbox):
    public = APIClient()

    # Headquarters recruits a hero
    created = admin_client.post('/api/heroes', {
        'username': 'gigel',
        'alias': 'Gigel VIP',
        'email': 'gigel@heroes.test',
        'category': 'Plumber',
    }, format='json')
    hero_id = created.data['heroId']

    login = public.post('/api/auth/hero-login', {'username': 'gigel', 'password': 'Hero123!'}, format='json')
    hero = bearer(login.data['token'])

    # A client asks for help
    submitted = public.post('/api/request', {
        'hero_id': hero_id,
        'client_name': 'Ion',
        'client_phone': '0722000000',
        'client_email': 'c@x.com',
        'description': 'Flooded kitchen',
    }, format='json')
    mission_id = submitted.data['id']

    # The hero works the mission
    for next_status, photo in [('ACCEPTED', None), ('IN_PROGRESS', 'before.jpg'), ('COMPLETED', 'after.jpg')]:
        payload = {'status': next_status}
        if photo:
            payload['photo'] = photo
        assert hero.put(f'/api/missions/{mission_id}/status', payload, format='json').status_code == 200

    missions = hero.get('/api/hero/my-missions').data
    assert missions[0]['status'] == 'COMPLETED'
    assert missions[0]['photo_before'] == 'before.jpg'
    assert missions[0]['photo_after'] == 'after.jpg'

    # The client leaves a top review
    public.post('/api/reviews', {'hero_id': hero_id, 'client_name': 'Ion', 'rating': 5}, format='json')

    profile = public.get('/api/heroes/slug/gigel-vip').data
    assert profile['trust_score'] == 57
    assert profile['missions_completed'] == 1

    # The hero renames through the onboarding link; headquarters approves
    public.post('/api/hero/public-submit-update', {'hero_id': hero_id, 'alias': 'Gigel Supreme'}, format='json')
    pending = admin_client.get('/api/admin/updates').data
    assert len(pending) == 1
    admin_client.post(f"/api/admin/approve-update/{pending[0]['id']}")

    assert public.get('/api/heroes/slug/gigel-supreme').data['id'] == hero_id
    assert public.get('/api/heroes/slug/gigel-vip').status_code == 404

    assert [m.extra_headers['X-Notification-Theme'] for m in mailoutbox] == [
        'welcome', 'onboarding', 'alert', 'waiting', 'accepted', 'completed', 'profile_update',
    ]
