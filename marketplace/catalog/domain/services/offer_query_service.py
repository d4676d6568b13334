"""
OfferQueryService - Offer listing & search

Plans a listing request with QueryPlanner and runs it against OfferStore.
Both public listing routes go through ``search``; they differ only in the
defaults and the projection they pass in.
"""

from typing import Any, Iterable, List, Mapping, Optional

from marketplace.catalog.domain.exceptions import QueryValidationError, StoreError
from marketplace.catalog.domain.models import Offer
from marketplace.catalog.domain.services.base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok
from marketplace.catalog.domain.services.offer_store import OfferStore
from marketplace.catalog.domain.services.query_planner import QueryPlanner


class OfferQueryService(BaseService):
    """Service for browsing and searching offers."""

    def __init__(self, store: OfferStore, planner: QueryPlanner):
        super().__init__()
        self.store = store
        self.planner = planner

    @BaseService.log_performance
    def search(
        self,
        params: Optional[Mapping[str, Any]] = None,
        defaults: Optional[Mapping[str, Any]] = None,
        fields: Optional[Iterable[str]] = None,
    ) -> ServiceResult[List[Offer]]:
        """
        Search offers.

        Args:
            params: Request parameters (title, priceMin, priceMax, sort, page, limit)
            defaults: Values used for parameters the request leaves out or blank
            fields: Optional model-field projection

        Returns:
            ServiceResult with the matching offers, owner populated

        Example:
            >>> result = offer_query_service.search({"title": "shirt", "sort": "price-desc"})
            >>> if result.ok:
            ...     offers = result.value
        """
        merged = dict(defaults or {})
        for key, value in (params or {}).items():
            if value not in (None, ""):
                merged[key] = value

        try:
            plan = self.planner.plan(merged)
        except QueryValidationError as e:
            return service_err(ErrorCodes.VALIDATION_ERROR, str(e), errors=e.errors)

        try:
            offers = self.store.execute(plan, fields=fields)
        except StoreError as e:
            return service_err(ErrorCodes.STORE_ERROR, str(e))

        self.logger.info(
            f"Search: filter={plan.filter}, sort={list(plan.sort)}, limit={plan.limit}, "
            f"skip={plan.skip}, results={len(offers)}"
        )
        return service_ok(offers)
