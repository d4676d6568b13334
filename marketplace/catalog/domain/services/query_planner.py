"""
QueryPlanner - Offer search parameters to a store query plan

Turns the optional listing parameters (title, priceMin, priceMax, sort, page,
limit) into a filter specification, a sort specification and pagination
bounds. Every parameter is independent: any subset composes with the others.

The planner is a pure data transformation. It never touches the database and
only fails when a numeric parameter cannot be parsed.
"""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Mapping, Optional, Tuple

from marketplace.catalog.domain.exceptions import QueryValidationError

SORT_OPTIONS: Dict[str, Tuple[str, ...]] = {
    "price-desc": ("-product_price",),
    "price-asc": ("product_price",),
}


@dataclass(frozen=True)
class QueryPlan:
    """
    Store-agnostic description of one listing query.

    Attributes:
        filter: ORM lookups, e.g. {"product_price__gte": Decimal("10")}
        sort: Ordering expressions, empty for store-defined order
        limit: Maximum number of offers, None for no limit
        skip: Number of offers to skip before the first returned one
    """

    filter: Dict[str, Any] = field(default_factory=dict)
    sort: Tuple[str, ...] = ()
    limit: Optional[int] = None
    skip: int = 0

    @property
    def is_paginated(self) -> bool:
        return self.limit is not None


def skip_for(page: int, page_size: int) -> int:
    """Offset of the first item of ``page`` (1-indexed)."""
    return (page - 1) * page_size


class QueryPlanner:
    """
    Build QueryPlans from request parameters.

    Example:
        >>> planner = QueryPlanner(default_page_size=5)
        >>> plan = planner.plan({"title": "shirt", "priceMin": "10", "sort": "price-asc", "page": "2"})
        >>> plan.filter
        {'product_name__icontains': 'shirt', 'product_price__gte': Decimal('10')}
        >>> plan.sort, plan.limit, plan.skip
        (('product_price',), 5, 5)
    """

    def __init__(self, default_page_size: int = 5, max_page_size: int = 100):
        if default_page_size < 1:
            raise ValueError("default_page_size must be a positive integer")
        self.default_page_size = default_page_size
        self.max_page_size = max(max_page_size, default_page_size)

    def plan(self, params: Optional[Mapping[str, Any]] = None) -> QueryPlan:
        """
        Translate listing parameters into a QueryPlan.

        Args:
            params: Query parameters; all keys are optional and blank values count as absent

        Returns:
            QueryPlan with filter, sort, limit and skip

        Raises:
            QueryValidationError: If priceMin/priceMax/page/limit is not a valid number
        """
        params = params or {}
        filters: Dict[str, Any] = {}

        title = self._text(params, "title")
        if title:
            # Substring match; regex metacharacters in the title are literal
            filters["product_name__icontains"] = title

        price_min = self._price(params, "priceMin")
        if price_min is not None:
            filters["product_price__gte"] = price_min

        price_max = self._price(params, "priceMax")
        if price_max is not None:
            filters["product_price__lte"] = price_max

        # Unknown sort keys leave the order to the store
        sort = SORT_OPTIONS.get(self._text(params, "sort") or "", ())

        limit, skip = self._pagination(params)

        return QueryPlan(filter=filters, sort=sort, limit=limit, skip=skip)

    def _pagination(self, params: Mapping[str, Any]) -> Tuple[Optional[int], int]:
        page = self._positive_int(params, "page")
        page_size = self._positive_int(params, "limit")

        if page is None and page_size is None:
            return None, 0

        page = page or 1
        page_size = min(page_size or self.default_page_size, self.max_page_size)
        return page_size, skip_for(page, page_size)

    @staticmethod
    def _text(params: Mapping[str, Any], name: str) -> Optional[str]:
        value = params.get(name)
        if value is None:
            return None
        value = str(value).strip()
        return value or None

    def _price(self, params: Mapping[str, Any], name: str) -> Optional[Decimal]:
        raw = self._text(params, name)
        if raw is None:
            return None
        try:
            value = Decimal(raw)
        except (InvalidOperation, ValueError):
            raise QueryValidationError(f"{name} must be a number, got '{raw}'", field=name)
        if not value.is_finite():
            raise QueryValidationError(f"{name} must be a finite number, got '{raw}'", field=name)
        return value

    def _positive_int(self, params: Mapping[str, Any], name: str) -> Optional[int]:
        raw = self._text(params, name)
        if raw is None:
            return None
        try:
            value = int(raw)
        except ValueError:
            raise QueryValidationError(f"{name} must be an integer, got '{raw}'", field=name)
        if value < 1:
            raise QueryValidationError(f"{name} must be at least 1, got {value}", field=name)
        return value
