"""
URL configuration for listingsBackend project.

Offer routes are mounted at the site root. Anything unmatched reaches the
catch-all route, and ``handler404`` covers Http404 raised inside views; both
answer with the fixed JSON not-found message.
"""

from django.contrib import admin
from django.urls import include, path, re_path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from .views import not_found, welcome

urlpatterns = [
    path("", welcome, name="welcome"),
    path("admin/", admin.site.urls),
    # API Documentation
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    # API endpoints
    path("", include("marketplace.urls")),
    # Anything unmatched, for any method, also when DEBUG is on
    re_path(r"^.*$", not_found, name="not-found"),
]

handler404 = "listingsBackend.views.not_found"
