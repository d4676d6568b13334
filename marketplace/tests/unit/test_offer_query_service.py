from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from django.http import QueryDict

from marketplace.catalog.domain.exceptions import StoreError
from marketplace.catalog.domain.services import ErrorCodes, OfferQueryService, OfferStore, QueryPlanner


@pytest.fixture
def store():
    store = MagicMock(spec=OfferStore)
    store.execute.return_value = []
    return store


@pytest.fixture
def query_service(store):
    return OfferQueryService(store=store, planner=QueryPlanner(default_page_size=5))


@pytest.mark.unit
class TestOfferQueryService:
    def test_search_without_params(self, query_service, store):
        result = query_service.search()

        assert result.ok is True
        assert result.value == []
        plan = store.execute.call_args.args[0]
        assert plan.filter == {}
        assert plan.limit is None

    def test_search_passes_plan_and_projection(self, query_service, store):
        offers = [MagicMock(), MagicMock()]
        store.execute.return_value = offers

        result = query_service.search(
            {"title": "shirt", "priceMax": "20", "sort": "price-desc"},
            fields=["product_name", "product_price"],
        )

        assert result.value == offers
        plan = store.execute.call_args.args[0]
        assert plan.filter == {"product_name__icontains": "shirt", "product_price__lte": Decimal("20")}
        assert plan.sort == ("-product_price",)
        assert store.execute.call_args.kwargs["fields"] == ["product_name", "product_price"]

    def test_defaults_apply_when_params_are_absent(self, query_service, store):
        query_service.search({}, defaults={"sort": "price-asc", "page": "1"})

        plan = store.execute.call_args.args[0]
        assert plan.sort == ("product_price",)
        assert (plan.limit, plan.skip) == (5, 0)

    def test_params_override_defaults(self, query_service, store):
        query_service.search(QueryDict("page=3&sort=price-desc"), defaults={"sort": "price-asc", "page": "1"})

        plan = store.execute.call_args.args[0]
        assert plan.sort == ("-product_price",)
        assert plan.skip == 10

    def test_blank_params_do_not_override_defaults(self, query_service, store):
        query_service.search(QueryDict("page=&title="), defaults={"page": "2"})

        plan = store.execute.call_args.args[0]
        assert plan.filter == {}
        assert plan.skip == 5

    def test_invalid_param_is_a_validation_error(self, query_service, store):
        result = query_service.search({"priceMin": "cheap"})

        assert result.ok is False
        assert result.error == ErrorCodes.VALIDATION_ERROR
        assert "priceMin" in result.errors
        store.execute.assert_not_called()

    def test_store_failure(self, query_service, store):
        store.execute.side_effect = StoreError("Could not read offers: connection lost")

        result = query_service.search({"title": "shirt"})

        assert result.ok is False
        assert result.error == ErrorCodes.STORE_ERROR
        assert "connection lost" in result.error_detail
