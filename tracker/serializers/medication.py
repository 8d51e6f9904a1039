from rest_framework import serializers

from tracker.models import Medication

from .text import clean_text


def _clean_optional(v):
    return clean_text(v) or None


class MedicationCreateSerializer(serializers.Serializer):
    # Looked up through the ownership resolver, so any value is accepted here
    profileId = serializers.CharField(max_length=32)
    name = serializers.CharField(max_length=255)
    currentStock = serializers.IntegerField(min_value=0, max_value=Medication.MAX_STOCK)
    lowStockThreshold = serializers.IntegerField(
        min_value=0,
        max_value=Medication.MAX_STOCK,
        required=False,
        default=Medication.DEFAULT_LOW_STOCK_THRESHOLD,
    )
    dosage = serializers.CharField(max_length=120, required=False, allow_blank=True, allow_null=True)
    takeTime = serializers.CharField(max_length=64, required=False, allow_blank=True, allow_null=True)
    frequency = serializers.CharField(max_length=120, required=False, allow_blank=True, allow_null=True)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    def validate_name(self, v):
        v = clean_text(v)
        if not v:
            raise serializers.ValidationError('Medication name is required.')
        return v

    def validate_dosage(self, v):
        return _clean_optional(v)

    def validate_takeTime(self, v):
        return _clean_optional(v)

    def validate_frequency(self, v):
        return _clean_optional(v)

    def validate_notes(self, v):
        return _clean_optional(v)


class MedicationListQuerySerializer(serializers.Serializer):
    profileId = serializers.CharField(max_length=32)


class RestockSerializer(serializers.Serializer):
    quantity = serializers.IntegerField(min_value=1, max_value=100000)
