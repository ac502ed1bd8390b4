"""
Review submission tests.
"""

import uuid

import pytest
from rest_framework import status

from heroes.models import Review


def review_payload(hero, rating, **extra):
    return {
        'hero_id': str(hero.pk),
        'client_name': 'Maria',
        'rating': rating,
        'comment': 'Fast and friendly',
        **extra,
    }


@pytest.mark.django_db
class TestSubmitReview:

    def test_top_rating_adds_two_trust(self, api_client, hero):
        response = api_client.post('/api/reviews', review_payload(hero, 5), format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        hero.refresh_from_db()
        assert hero.trust_score == 52

    @pytest.mark.parametrize('rating', [1, 2, 3, 4])
    def test_lower_ratings_leave_trust_unchanged(self, api_client, hero, rating):
        api_client.post('/api/reviews', review_payload(hero, rating), format='json')

        hero.refresh_from_db()
        assert hero.trust_score == 50
        assert Review.objects.filter(hero=hero, rating=rating).count() == 1

    def test_two_top_ratings_from_fifty(self, api_client, hero):
        api_client.post('/api/reviews', review_payload(hero, 5, client_name='A'), format='json')
        api_client.post('/api/reviews', review_payload(hero, 5, client_name='B'), format='json')

        hero.refresh_from_db()
        assert hero.trust_score == 54
        assert hero.reviews.count() == 2

    @pytest.mark.parametrize('rating', [0, 6])
    def test_rating_outside_range_is_rejected(self, api_client, hero, rating):
        response = api_client.post('/api/reviews', review_payload(hero, rating), format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error_code'] == 'VALIDATION_ERROR'
        assert Review.objects.count() == 0

    def test_unknown_hero_is_404(self, api_client, hero):
        payload = review_payload(hero, 5, hero_id=str(uuid.uuid4()))

        response = api_client.post('/api/reviews', payload, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert Review.objects.count() == 0


@pytest.mark.django_db(transaction=True)
class TestOverlappingTopRatings:

    def test_review_landing_mid_submission_is_not_lost(self, hero, monkeypatch):
        from heroes import services

        real_credit = services.credit_top_rating
        calls = []

        def credit_after_second_review(hero_id):
            calls.append(hero_id)
            if len(calls) == 1:
                # The outer submission has already loaded the hero at 50.
                services.submit_review(hero.pk, 'B', 5)
            return real_credit(hero_id)

        monkeypatch.setattr(services, 'credit_top_rating', credit_after_second_review)

        services.submit_review(hero.pk, 'A', 5)

        hero.refresh_from_db()
        assert len(calls) == 2
        assert hero.trust_score == 54
        assert hero.reviews.count() == 2

    def test_stale_instances_both_credit(self, hero):
        from heroes.models import Hero
        from heroes.reputation import credit_top_rating

        first = Hero.objects.get(pk=hero.pk)
        second = Hero.objects.get(pk=hero.pk)

        assert credit_top_rating(first.pk)
        assert credit_top_rating(second.pk)

        assert second.trust_score == 50
        assert Hero.objects.get(pk=hero.pk).trust_score == 54
