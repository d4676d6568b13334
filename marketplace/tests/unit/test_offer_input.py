import inspect
from decimal import Decimal

import pytest

from marketplace.catalog.domain.services import offer_builder
from marketplace.catalog.domain.services.offer_input import OfferInputSerializer


@pytest.mark.unit
class TestOfferInputSerializer:
    def test_defaults(self):
        serializer = OfferInputSerializer(data={"price": "12.5"})

        assert serializer.is_valid(), serializer.errors
        assert serializer.validated_data == {
            "title": "",
            "description": "",
            "price": Decimal("12.50"),
            "brand": "",
            "size": "",
            "condition": "",
            "color": "",
            "city": "",
        }

    @pytest.mark.parametrize("price", ["abc", "NaN", "-0.01", "1.234", "100000000"])
    def test_invalid_price(self, price):
        serializer = OfferInputSerializer(data={"price": price})

        assert not serializer.is_valid()
        assert "price" in serializer.errors

    def test_title_length(self):
        serializer = OfferInputSerializer(data={"price": "1", "title": "x" * 201})

        assert not serializer.is_valid()
        assert "title" in serializer.errors

    def test_builder_does_not_import_api_layer(self):
        source = inspect.getsource(offer_builder)

        assert "marketplace.catalog.api" not in source
        assert offer_builder.OfferInputSerializer is OfferInputSerializer
