"""
Missions Serializers.
"""

from rest_framework import serializers

from heroes.serializers import HeroSummarySerializer

from .models import MissionStatus, ServiceRequest


class ServiceRequestSerializer(serializers.ModelSerializer):
    """Mission as listed to administrators and heroes."""

    hero = HeroSummarySerializer(read_only=True)

    class Meta:
        model = ServiceRequest
        fields = [
            'id', 'hero', 'client_name', 'client_phone', 'client_email',
            'description', 'status', 'photo_before', 'photo_after', 'created_at',
        ]
        read_only_fields = fields


class ServiceRequestCreateSerializer(serializers.Serializer):
    """Input for a client's service request."""

    hero_id = serializers.UUIDField()
    client_name = serializers.CharField(max_length=150)
    client_phone = serializers.CharField(max_length=40)
    client_email = serializers.EmailField(required=False, allow_blank=True, default='')
    description = serializers.CharField()


class MissionStatusUpdateSerializer(serializers.Serializer):
    """Input for a hero's status write."""

    status = serializers.ChoiceField(choices=MissionStatus.choices)
    photo = serializers.CharField(required=False, allow_blank=True, allow_null=True)
