from rest_framework import serializers

from authentication.serializers import OwnerPublicSerializer
from marketplace.catalog.domain.models import Offer


class OfferSerializer(serializers.ModelSerializer):
    """
    Wire representation of an offer.

    Pass ``fields`` to restrict the output to a subset of the wire names,
    e.g. ``OfferSerializer(offers, many=True, fields=["productName", "productPrice"])``.
    """

    productName = serializers.CharField(source="product_name", read_only=True)
    productDescription = serializers.CharField(source="product_description", read_only=True)
    productPrice = serializers.DecimalField(
        source="product_price", max_digits=10, decimal_places=2, coerce_to_string=False, read_only=True
    )
    productDetails = serializers.JSONField(source="product_details", read_only=True)
    productImage = serializers.JSONField(source="product_image", read_only=True, allow_null=True)
    owner = OwnerPublicSerializer(read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Offer
        fields = [
            "id",
            "productName",
            "productDescription",
            "productPrice",
            "productDetails",
            "productImage",
            "owner",
            "createdAt",
        ]
        read_only_fields = ["id"]

    # Wire name -> model field, used to project store queries
    MODEL_FIELDS = {
        "id": "id",
        "productName": "product_name",
        "productDescription": "product_description",
        "productPrice": "product_price",
        "productDetails": "product_details",
        "productImage": "product_image",
        "owner": "owner",
        "createdAt": "created_at",
    }

    def __init__(self, *args, fields=None, **kwargs):
        super().__init__(*args, **kwargs)
        if fields is not None:
            for name in set(self.fields) - set(fields):
                self.fields.pop(name)

    @classmethod
    def model_fields_for(cls, fields):
        return [cls.MODEL_FIELDS[name] for name in fields if name in cls.MODEL_FIELDS]


class ErrorResponseSerializer(serializers.Serializer):
    """Standard error response"""

    message = serializers.CharField(help_text="Human-readable error message")
    errors = serializers.DictField(help_text="Field-level validation errors", required=False)
