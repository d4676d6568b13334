from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile

from infrastructure.media import MockMediaHost
from marketplace.catalog.domain.exceptions import StoreError
from marketplace.catalog.domain.services import ErrorCodes, OfferBuilder, OfferStore

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


@pytest.fixture
def owner():
    user = MagicMock()
    user.pk = "owner-1"
    user.is_authenticated = True
    return user


@pytest.fixture
def media_host():
    return MockMediaHost()


@pytest.fixture
def store():
    store = MagicMock(spec=OfferStore)
    store.create.side_effect = lambda **fields: MagicMock(id="offer-1", **fields)
    return store


@pytest.fixture
def builder(media_host, store):
    return OfferBuilder(media_host=media_host, store=store, max_image_bytes=1024)


def picture(content=PNG_BYTES, name="shirt.png", content_type="image/png"):
    return SimpleUploadedFile(name, content, content_type=content_type)


@pytest.mark.unit
class TestOfferBuilder:
    def test_publish_without_picture(self, builder, store, owner, media_host):
        result = builder.publish(
            {"title": "Blue shirt", "description": "Barely worn", "price": "19.90", "brand": "Acme", "city": "Lyon"},
            owner,
        )

        assert result.ok is True
        store.create.assert_called_once()
        fields = store.create.call_args.kwargs
        assert fields["product_name"] == "Blue shirt"
        assert fields["product_description"] == "Barely worn"
        assert fields["product_price"] == Decimal("19.90")
        assert fields["product_image"] is None
        assert fields["owner"] is owner
        assert fields["product_details"] == [
            {"brand": "Acme"},
            {"size": ""},
            {"condition": ""},
            {"color": ""},
            {"city": "Lyon"},
        ]
        assert media_host.uploads == []

    def test_missing_optional_fields_default_to_empty(self, builder, store, owner):
        result = builder.publish({"price": "5"}, owner)

        assert result.ok is True
        fields = store.create.call_args.kwargs
        assert fields["product_name"] == ""
        assert fields["product_description"] == ""
        assert [list(entry.values())[0] for entry in fields["product_details"]] == [""] * 5

    def test_publish_with_picture(self, builder, store, owner, media_host):
        result = builder.publish({"title": "Lamp", "price": "30"}, owner, picture())

        assert result.ok is True
        assert len(media_host.uploads) == 1
        assert media_host.uploads[0].startswith("data:image/png;base64,")

        image = store.create.call_args.kwargs["product_image"]
        assert image["url"].startswith(MockMediaHost.BASE_URL)
        assert image["public_id"].startswith("offers/")

    def test_picture_mime_type_is_guessed_from_name(self, builder, store, owner, media_host):
        upload = picture(name="photo.jpg", content_type="")

        result = builder.publish({"price": "30"}, owner, upload)

        assert result.ok is True
        assert media_host.uploads[0].startswith("data:image/jpeg;base64,")

    def test_upload_failure_stores_nothing(self, builder, store, owner, media_host):
        media_host.fail_with = "Image upload timed out after 30s"

        result = builder.publish({"title": "Lamp", "price": "30"}, owner, picture())

        assert result.ok is False
        assert result.error == ErrorCodes.UPLOAD_ERROR
        assert "timed out" in result.error_detail
        store.create.assert_not_called()

    def test_non_image_upload_is_an_encoding_error(self, builder, store, owner, media_host):
        result = builder.publish({"price": "30"}, owner, picture(b"hello", "notes.txt", "text/plain"))

        assert result.ok is False
        assert result.error == ErrorCodes.ENCODING_ERROR
        assert media_host.uploads == []
        store.create.assert_not_called()

    def test_oversized_picture_is_an_encoding_error(self, builder, store, owner):
        result = builder.publish({"price": "30"}, owner, picture(b"\x00" * 2048))

        assert result.error == ErrorCodes.ENCODING_ERROR
        store.create.assert_not_called()

    def test_empty_picture_is_an_encoding_error(self, builder, store, owner):
        result = builder.publish({"price": "30"}, owner, picture(b""))

        assert result.error == ErrorCodes.ENCODING_ERROR
        store.create.assert_not_called()

    @pytest.mark.parametrize("price", ["abc", "-1", ""])
    def test_invalid_price_is_rejected(self, builder, store, owner, media_host, price):
        result = builder.publish({"title": "Lamp", "price": price}, owner, picture())

        assert result.ok is False
        assert result.error == ErrorCodes.VALIDATION_ERROR
        assert "price" in result.errors
        assert media_host.uploads == []
        store.create.assert_not_called()

    def test_missing_price_is_rejected(self, builder, store, owner):
        result = builder.publish({"title": "Lamp"}, owner)

        assert result.error == ErrorCodes.VALIDATION_ERROR
        assert "price" in result.errors
        store.create.assert_not_called()

    def test_store_failure(self, builder, store, owner):
        store.create.side_effect = StoreError("Could not save offer: disk full")

        result = builder.publish({"price": "30"}, owner)

        assert result.ok is False
        assert result.error == ErrorCodes.STORE_ERROR
        assert "disk full" in result.error_detail

    def test_anonymous_owner_is_rejected(self, builder, store):
        anonymous = MagicMock(is_authenticated=False)

        result = builder.publish({"price": "30"}, anonymous)

        assert result.error == ErrorCodes.AUTH_ERROR
        store.create.assert_not_called()

    def test_missing_owner_is_rejected(self, builder, store):
        result = builder.publish({"price": "30"}, None)

        assert result.error == ErrorCodes.AUTH_ERROR
        store.create.assert_not_called()
