"""
Recruitment Serializers.
"""

from rest_framework import serializers

from .models import HeroApplication


class HeroApplicationSerializer(serializers.ModelSerializer):
    """Application as listed to administrators; also validates intake."""

    class Meta:
        model = HeroApplication
        fields = ['id', 'name', 'email', 'phone', 'category', 'message', 'created_at']
        read_only_fields = ['id', 'created_at']
        extra_kwargs = {'message': {'required': False, 'allow_blank': True}}
