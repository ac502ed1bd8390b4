"""
Accounts Serializers - credential exchange payloads.
"""

from rest_framework import serializers


class LoginSerializer(serializers.Serializer):
    """Username/password pair posted to both login endpoints."""
    username = serializers.CharField(max_length=150)
    password = serializers.CharField(write_only=True, trim_whitespace=False)
