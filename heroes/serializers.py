"""
Heroes Serializers - Public directory, administrator and review payloads.

Public representations never expose the password hash, the login username
or the contact email.
"""

from django.conf import settings
from rest_framework import serializers

from .models import Hero, Review


class ReviewSerializer(serializers.ModelSerializer):
    """Read-only review as shown on a hero's public page."""

    class Meta:
        model = Review
        fields = ['id', 'hero', 'client_name', 'rating', 'comment', 'created_at']
        read_only_fields = fields


class HeroPublicSerializer(serializers.ModelSerializer):
    """Directory entry of a hero, with its reviews."""

    reviews = ReviewSerializer(many=True, read_only=True)

    class Meta:
        model = Hero
        fields = [
            'id', 'alias', 'slug', 'category', 'hourly_rate', 'description',
            'avatar_url', 'video_url', 'action_areas', 'trust_score',
            'missions_completed', 'created_at', 'reviews',
        ]
        read_only_fields = fields


class HeroSummarySerializer(serializers.ModelSerializer):
    """Compact hero reference embedded in missions and change requests."""

    class Meta:
        model = Hero
        fields = ['id', 'alias', 'slug', 'category', 'avatar_url']
        read_only_fields = fields


class HeroAdminSerializer(serializers.ModelSerializer):
    """Full hero record for the administrator portal (no password hash)."""

    class Meta:
        model = Hero
        fields = [
            'id', 'username', 'alias', 'slug', 'email', 'phone', 'category',
            'hourly_rate', 'description', 'avatar_url', 'video_url',
            'action_areas', 'trust_score', 'missions_completed',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields


class _HeroWriteSerializer(serializers.Serializer):
    email = serializers.EmailField(required=False, allow_blank=True)
    phone = serializers.CharField(required=False, allow_blank=True, max_length=40)
    category = serializers.CharField(required=False, allow_blank=True, max_length=100)
    hourly_rate = serializers.DecimalField(
        required=False, allow_null=True, max_digits=10, decimal_places=2, min_value=0,
    )
    description = serializers.CharField(required=False, allow_blank=True)
    avatar_url = serializers.CharField(required=False, allow_blank=True)
    video_url = serializers.CharField(required=False, allow_blank=True)
    action_areas = serializers.ListField(
        child=serializers.CharField(), required=False,
    )
    trust_score = serializers.IntegerField(required=False, min_value=0)


class HeroCreateSerializer(_HeroWriteSerializer):
    """Input for administrator hero creation."""

    username = serializers.CharField(max_length=150)
    alias = serializers.CharField(max_length=150)
    password = serializers.CharField(required=False, allow_blank=True, write_only=True)


class HeroUpdateSerializer(_HeroWriteSerializer):
    """
    Input for administrator direct edits. Every field is optional;
    unknown keys such as id, reviews or timestamps are ignored.
    """

    username = serializers.CharField(required=False, max_length=150)
    alias = serializers.CharField(required=False, max_length=150)
    password = serializers.CharField(required=False, allow_blank=True, write_only=True)
    missions_completed = serializers.IntegerField(required=False, min_value=0)


class ReviewCreateSerializer(serializers.Serializer):
    """Input for a client review."""

    hero_id = serializers.UUIDField()
    client_name = serializers.CharField(max_length=150)
    rating = serializers.IntegerField(min_value=1)
    comment = serializers.CharField(required=False, allow_blank=True, default='')

    def validate_rating(self, value):
        max_rating = settings.SUPERFIX['MAX_RATING']
        if value > max_rating:
            raise serializers.ValidationError(f"Rating must be between 1 and {max_rating}.")
        return value
