from marketplace.catalog.domain.services.offer_input import OfferInputSerializer

from .offer_serializers import ErrorResponseSerializer, OfferSerializer


__all__ = ["ErrorResponseSerializer", "OfferInputSerializer", "OfferSerializer"]
