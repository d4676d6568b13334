from django.urls import path

from .catalog.api.views.offer_views import OfferListView, OfferPublishView

app_name = "marketplace"

# The short listing route keeps its historical behaviour as defaults:
# cheapest first, first page of PAGE_SIZE, name and price only.
LISTING_DEFAULTS = {"sort": "price-asc", "page": "1"}
LISTING_FIELDS = ["productName", "productPrice"]

urlpatterns = [
    path("offer/publish", OfferPublishView.as_view(), name="offer-publish"),
    path("offers/all", OfferListView.as_view(), name="offer-list-all"),
    path(
        "offers",
        OfferListView.as_view(default_params=LISTING_DEFAULTS, fields=LISTING_FIELDS),
        name="offer-list",
    ),
]
