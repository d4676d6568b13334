from .base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok
from .offer_builder import OfferBuilder
from .offer_input import OfferInputSerializer
from .offer_query_service import OfferQueryService
from .offer_store import OfferQuery, OfferStore
from .query_planner import QueryPlan, QueryPlanner


__all__ = [
    "BaseService",
    "ErrorCodes",
    "ServiceResult",
    "service_ok",
    "service_err",
    "OfferBuilder",
    "OfferInputSerializer",
    "OfferQueryService",
    "OfferStore",
    "OfferQuery",
    "QueryPlan",
    "QueryPlanner",
]
