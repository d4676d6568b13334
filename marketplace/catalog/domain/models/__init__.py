from .offer import DETAIL_KEYS, Offer


__all__ = ["Offer", "DETAIL_KEYS"]
