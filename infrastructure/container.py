"""
Dependency Injection Container
================================

Simple service locator for the infrastructure handles and the offer services
built on them. Handles are created once (``initialize()`` at startup, or
lazily on first use) and passed explicitly into the services.

Usage:
    from infrastructure.container import container

    builder = container.offer_builder()
    media_host = container.media_host()
"""

import logging
from typing import Optional

from django.conf import settings

from .media import MediaHostFactory, MediaHostInterface

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Service container for infrastructure dependencies.

    Implements lazy initialization and caching of service instances.
    Singleton pattern.
    """

    _instance: Optional["ServiceContainer"] = None
    _initialized: bool = False

    def __new__(cls):
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize container (only once)."""
        if not self._initialized:
            self._media_host: Optional[MediaHostInterface] = None

            # Domain Services
            self._offer_store = None
            self._query_planner = None
            self._offer_builder = None
            self._offer_query_service = None

            self._initialized = True
            logger.info("Service container initialized")

    def initialize(self):
        """
        Eagerly build every handle.

        Called once by the WSGI/ASGI entry points so that configuration errors
        (e.g. missing media host credentials) surface before serving traffic.
        """
        self.media_host()
        self.offer_builder()
        self.offer_query_service()
        logger.info("Service container ready")

    def media_host(self) -> MediaHostInterface:
        """
        Get media host instance (Cloudinary or mock).

        Returns:
            MediaHostInterface implementation (cached)
        """
        if self._media_host is None:
            self._media_host = MediaHostFactory.create()
            logger.debug(f"Created media host: {type(self._media_host).__name__}")

        return self._media_host

    def offer_store(self):
        """Get OfferStore instance."""
        if self._offer_store is None:
            from marketplace.catalog.domain.services import OfferStore

            self._offer_store = OfferStore()
            logger.debug("Created OfferStore")
        return self._offer_store

    def query_planner(self):
        """Get QueryPlanner instance configured from MARKETPLACE settings."""
        if self._query_planner is None:
            from marketplace.catalog.domain.services import QueryPlanner

            config = getattr(settings, "MARKETPLACE", {})
            self._query_planner = QueryPlanner(
                default_page_size=config.get("PAGE_SIZE", 5),
                max_page_size=config.get("MAX_PAGE_SIZE", 100),
            )
            logger.debug("Created QueryPlanner")
        return self._query_planner

    def offer_builder(self):
        """Get OfferBuilder instance."""
        if self._offer_builder is None:
            from marketplace.catalog.domain.services import OfferBuilder

            config = getattr(settings, "MARKETPLACE", {})
            self._offer_builder = OfferBuilder(
                media_host=self.media_host(),
                store=self.offer_store(),
                max_image_bytes=config.get("MAX_IMAGE_BYTES"),
            )
            logger.debug("Created OfferBuilder")
        return self._offer_builder

    def offer_query_service(self):
        """Get OfferQueryService instance."""
        if self._offer_query_service is None:
            from marketplace.catalog.domain.services import OfferQueryService

            self._offer_query_service = OfferQueryService(store=self.offer_store(), planner=self.query_planner())
            logger.debug("Created OfferQueryService")
        return self._offer_query_service

    def reset(self):
        """
        Reset all cached service instances.

        Useful for testing or when switching between environments.
        """
        self._media_host = None
        self._offer_store = None
        self._query_planner = None
        self._offer_builder = None
        self._offer_query_service = None
        logger.info("Service container reset")

    def configure_for_testing(self):
        """
        Configure container with mock services for testing.

        Sets up:
            - In-memory mock media host (instead of Cloudinary)
        """
        self.reset()
        self._media_host = MediaHostFactory.create("mock")
        logger.info("Service container configured for testing")


# Global singleton instance
container = ServiceContainer()


def get_media_host() -> MediaHostInterface:
    """Get media host from global container."""
    return container.media_host()
