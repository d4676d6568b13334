from django.contrib import admin

from .models import Offer


@admin.register(Offer)
class OfferAdmin(admin.ModelAdmin):
    list_display = ("product_name", "product_price", "owner", "created_at")
    search_fields = ("product_name", "product_description")
    readonly_fields = ("id", "owner", "product_image", "created_at")

    def has_add_permission(self, request):
        # Offers are only created through the publish endpoint, which sets the owner
        return False
