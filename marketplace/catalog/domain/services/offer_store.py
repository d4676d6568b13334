"""
OfferStore - Persistence adapter for offers

Wraps the Offer manager behind a small query-builder pipeline
(find -> sort -> skip -> limit -> populate -> select) so that services work
with QueryPlans instead of raw querysets. Omitted stages are identity
transforms. Database failures surface as StoreError.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from django.db import DatabaseError, transaction

from marketplace.catalog.domain.exceptions import StoreError
from marketplace.catalog.domain.models import Offer
from marketplace.catalog.domain.services.query_planner import QueryPlan

logger = logging.getLogger(__name__)


class OfferQuery:
    """
    Lazily composed offer query.

    Each stage returns a new OfferQuery; nothing hits the database until
    ``all()`` or ``count()`` is called.
    """

    def __init__(
        self,
        queryset,
        ordering: Tuple[str, ...] = (),
        limit: Optional[int] = None,
        skip: int = 0,
        relations: Tuple[str, ...] = (),
        fields: Tuple[str, ...] = (),
    ):
        self._queryset = queryset
        self._ordering = ordering
        self._limit = limit
        self._skip = skip
        self._relations = relations
        self._fields = fields

    def _clone(self, **changes) -> "OfferQuery":
        state = {
            "ordering": self._ordering,
            "limit": self._limit,
            "skip": self._skip,
            "relations": self._relations,
            "fields": self._fields,
        }
        state.update(changes)
        return OfferQuery(self._queryset, **state)

    def sort(self, spec: Optional[Iterable[str]] = None) -> "OfferQuery":
        return self._clone(ordering=tuple(spec or ()))

    def limit(self, n: Optional[int] = None) -> "OfferQuery":
        if n is not None and n < 0:
            raise ValueError("limit must not be negative")
        return self._clone(limit=n)

    def skip(self, n: Optional[int] = None) -> "OfferQuery":
        if n is not None and n < 0:
            raise ValueError("skip must not be negative")
        return self._clone(skip=n or 0)

    def populate(self, relation: str) -> "OfferQuery":
        if relation in self._relations:
            return self
        return self._clone(relations=self._relations + (relation,))

    def select(self, fields: Optional[Iterable[str]] = None) -> "OfferQuery":
        return self._clone(fields=tuple(fields or ()))

    def build(self):
        """Return the Django queryset this pipeline describes."""
        queryset = self._queryset
        if self._ordering:
            queryset = queryset.order_by(*self._ordering)
        if self._relations:
            queryset = queryset.select_related(*self._relations)
        if self._fields:
            # Populated relations cannot be deferred
            queryset = queryset.only(*dict.fromkeys(self._fields + self._relations))
        if self._limit is not None:
            queryset = queryset[self._skip : self._skip + self._limit]
        elif self._skip:
            queryset = queryset[self._skip :]
        return queryset

    def all(self) -> List[Offer]:
        try:
            return list(self.build())
        except DatabaseError as e:
            logger.error(f"Offer query failed: {e}", exc_info=True)
            raise StoreError(f"Could not read offers: {e}") from e

    def count(self) -> int:
        """Number of offers ``all()`` would return, pagination included."""
        try:
            return self.build().count()
        except DatabaseError as e:
            logger.error(f"Offer count failed: {e}", exc_info=True)
            raise StoreError(f"Could not count offers: {e}") from e


class OfferStore:
    """Document-style access to the Offer table."""

    def __init__(self, manager=None):
        self.manager = manager if manager is not None else Offer.objects

    def create(self, **fields: Any) -> Offer:
        """
        Insert one offer.

        Raises:
            StoreError: If the write fails; nothing is left behind
        """
        try:
            with transaction.atomic():
                offer = self.manager.create(**fields)
        except DatabaseError as e:
            logger.error(f"Failed to persist offer: {e}", exc_info=True)
            raise StoreError(f"Could not save offer: {e}") from e

        logger.info(f"Persisted offer {offer.id}")
        return offer

    def find(self, filter_spec: Optional[Dict[str, Any]] = None) -> OfferQuery:
        queryset = self.manager.all()
        if filter_spec:
            queryset = queryset.filter(**filter_spec)
        return OfferQuery(queryset)

    def execute(self, plan: QueryPlan, fields: Optional[Iterable[str]] = None) -> List[Offer]:
        """Run a QueryPlan with ``owner`` populated unless projected away."""
        fields = tuple(fields or ())
        query = self.find(plan.filter).sort(plan.sort).skip(plan.skip).limit(plan.limit)
        if not fields or "owner" in fields:
            query = query.populate("owner")
        return query.select(fields).all()
