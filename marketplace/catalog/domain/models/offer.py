import uuid

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

# Order of the attribute records in ``product_details``.
DETAIL_KEYS = ("brand", "size", "condition", "color", "city")


class Offer(models.Model):
    # Basic Information
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    product_name = models.CharField(max_length=200, blank=True)
    product_description = models.TextField(blank=True)
    product_price = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(0)])

    # One single-key record per attribute, in DETAIL_KEYS order
    product_details = models.JSONField(default=list, blank=True)

    # Media host reference (url, secure_url, public_id, ...); null when no picture was sent
    product_image = models.JSONField(null=True, blank=True)

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="offers",
        editable=False,
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        app_label = "marketplace"
        indexes = [
            models.Index(fields=["product_price"], name="marketplace_product_a1f3c2_idx"),
            models.Index(fields=["product_name"], name="marketplace_product_5d8e91_idx"),
            models.Index(fields=["owner", "-created_at"], name="marketplace_owner_i_7b2c4e_idx"),
        ]

    @staticmethod
    def build_details(**values) -> list:
        """Return the five attribute records, blank where a value is missing."""
        return [{key: values.get(key) or ""} for key in DETAIL_KEYS]

    def __str__(self):
        return self.product_name or str(self.id)
