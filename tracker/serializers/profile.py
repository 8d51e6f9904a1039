from rest_framework import serializers

from .text import clean_text


class ProfileCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)

    def validate_name(self, v):
        v = clean_text(v)
        if not v:
            raise serializers.ValidationError('Profile name is required.')
        return v
