"""
Moderation Serializers.
"""

from rest_framework import serializers

from heroes.serializers import HeroSummarySerializer

from .models import ProfileChangeRequest


class ProfileChangeRequestSerializer(serializers.ModelSerializer):
    """A pending change as shown in the moderation queue."""

    hero = HeroSummarySerializer(read_only=True)

    class Meta:
        model = ProfileChangeRequest
        fields = [
            'id', 'hero', 'alias', 'avatar_url', 'video_url', 'description',
            'hourly_rate', 'action_areas', 'created_at',
        ]
        read_only_fields = fields


class ProposeUpdateSerializer(serializers.Serializer):
    """Profile fields a hero may propose from the portal."""

    avatar_url = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    video_url = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    hourly_rate = serializers.DecimalField(
        required=False, allow_null=True, max_digits=10, decimal_places=2, min_value=0,
    )
    action_areas = serializers.ListField(
        child=serializers.CharField(), required=False, allow_null=True,
    )


class PublicProposeUpdateSerializer(ProposeUpdateSerializer):
    """Onboarding-link proposal: names the hero and may propose an alias."""

    hero_id = serializers.UUIDField()
    alias = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=150)
