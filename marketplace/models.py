from marketplace.catalog.domain.models import DETAIL_KEYS, Offer


__all__ = ["Offer", "DETAIL_KEYS"]
