"""
Missions Filters - Django Filter classes for the mission list.
"""

import django_filters

from .models import MissionStatus, ServiceRequest


class ServiceRequestFilter(django_filters.FilterSet):
    """Filter missions by status, hero and creation date."""
    status = django_filters.ChoiceFilter(choices=MissionStatus.choices)
    hero = django_filters.UUIDFilter(field_name='hero_id')
    created_after = django_filters.DateTimeFilter(field_name='created_at', lookup_expr='gte')
    created_before = django_filters.DateTimeFilter(field_name='created_at', lookup_expr='lte')

    class Meta:
        model = ServiceRequest
        fields = ['status', 'hero', 'created_after', 'created_before']
