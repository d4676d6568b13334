from rest_framework import serializers


class OfferInputSerializer(serializers.Serializer):
    """Input schema for publishing an offer (multipart form or JSON)."""

    title = serializers.CharField(required=False, allow_blank=True, default="", max_length=200)
    description = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=False)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    brand = serializers.CharField(required=False, allow_blank=True, default="", max_length=100)
    size = serializers.CharField(required=False, allow_blank=True, default="", max_length=100)
    condition = serializers.CharField(required=False, allow_blank=True, default="", max_length=100)
    color = serializers.CharField(required=False, allow_blank=True, default="", max_length=100)
    city = serializers.CharField(required=False, allow_blank=True, default="", max_length=100)
