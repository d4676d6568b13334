"""
WSGI config for listingsBackend project.

It exposes the WSGI callable as a module-level variable named ``application``.
"""

import os

from django.core.wsgi import get_wsgi_application


os.environ.setdefault("DJANGO_SETTINGS_MODULE", "listingsBackend.settings")

application = get_wsgi_application()

# Build the media host and services before the first request is served
from infrastructure.container import container  # noqa: E402

container.initialize()
