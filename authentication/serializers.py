from django.contrib.auth import get_user_model
from rest_framework import serializers


User = get_user_model()


class OwnerPublicSerializer(serializers.ModelSerializer):
    """Public profile of an offer owner, as shown on populated offers."""

    class Meta:
        model = User
        fields = ["id", "username", "avatar"]
        read_only_fields = fields
