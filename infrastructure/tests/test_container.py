"""
Service Container Tests
========================

Unit tests for dependency injection container.
"""

from django.test import SimpleTestCase, override_settings

from infrastructure.container import ServiceContainer, container, get_media_host
from infrastructure.media import CloudinaryMediaHost, MediaHostInterface, MockMediaHost
from marketplace.catalog.domain.services import OfferBuilder, OfferQueryService, OfferStore, QueryPlanner


class ServiceContainerTest(SimpleTestCase):
    """Test ServiceContainer implementation."""

    def setUp(self):
        container.reset()

    def tearDown(self):
        container.reset()

    def test_container_is_singleton(self):
        container1 = ServiceContainer()
        container2 = ServiceContainer()

        self.assertIs(container1, container2)
        self.assertIs(container1, container)

    def test_get_media_host(self):
        media_host = container.media_host()

        self.assertIsInstance(media_host, MediaHostInterface)
        self.assertIsInstance(media_host, MockMediaHost)

        # Second call should return cached instance
        self.assertIs(media_host, container.media_host())
        self.assertIs(media_host, get_media_host())

    @override_settings(
        INFRASTRUCTURE={"MEDIA_BACKEND": "cloudinary"},
        CLOUDINARY={"CLOUD_NAME": "demo", "API_KEY": "k", "API_SECRET": "s"},
    )
    def test_media_host_follows_settings(self):
        self.assertIsInstance(container.media_host(), CloudinaryMediaHost)

    def test_offer_builder_is_wired(self):
        builder = container.offer_builder()

        self.assertIsInstance(builder, OfferBuilder)
        self.assertIs(builder.media_host, container.media_host())
        self.assertIsInstance(builder.store, OfferStore)
        self.assertIs(builder, container.offer_builder())

    @override_settings(MARKETPLACE={"PAGE_SIZE": 3, "MAX_PAGE_SIZE": 10, "MAX_IMAGE_BYTES": 2048})
    def test_services_read_marketplace_settings(self):
        planner = container.query_planner()

        self.assertIsInstance(planner, QueryPlanner)
        self.assertEqual(planner.default_page_size, 3)
        self.assertEqual(planner.max_page_size, 10)
        self.assertEqual(container.offer_builder().max_image_bytes, 2048)

    def test_query_service_shares_store(self):
        service = container.offer_query_service()

        self.assertIsInstance(service, OfferQueryService)
        self.assertIs(service.store, container.offer_store())
        self.assertIs(service.planner, container.query_planner())

    def test_reset(self):
        media_host = container.media_host()

        container.reset()

        self.assertIsNot(media_host, container.media_host())

    @override_settings(INFRASTRUCTURE={"MEDIA_BACKEND": "cloudinary"}, CLOUDINARY={})
    def test_configure_for_testing_uses_mock_host(self):
        container.configure_for_testing()

        self.assertIsInstance(container.media_host(), MockMediaHost)

    def test_initialize_builds_services(self):
        container.initialize()

        self.assertIsNotNone(container._offer_builder)
        self.assertIsNotNone(container._offer_query_service)
