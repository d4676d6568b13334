"""
OfferBuilder - Offer publishing

Validates raw publish fields, uploads the optional picture to the media host,
and persists the offer. The steps run strictly in that order and the whole
operation is all-or-nothing: a failed upload or write leaves no offer behind.
"""

import mimetypes
from typing import Any, Mapping, Optional

from infrastructure.media import EncodingError, ImageReference, MediaHostInterface, UploadError
from marketplace.catalog.domain.exceptions import StoreError
from marketplace.catalog.domain.models import Offer
from marketplace.catalog.domain.services.base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok
from marketplace.catalog.domain.services.offer_input import OfferInputSerializer
from marketplace.catalog.domain.services.offer_store import OfferStore


class OfferBuilder(BaseService):
    """
    Service that turns a publish request into a stored Offer.

    Responsibilities:
    - Validate the submitted fields against OfferInputSerializer
    - Build the fixed five-entry product_details list
    - Upload the picture (if any) before anything is written
    - Persist exactly one offer owned by the resolved identity
    """

    def __init__(self, media_host: MediaHostInterface, store: OfferStore, max_image_bytes: Optional[int] = None):
        """
        Initialize OfferBuilder.

        Args:
            media_host: Where pictures are uploaded
            store: Where offers are written
            max_image_bytes: Largest accepted picture, None for no limit
        """
        super().__init__()
        self.media_host = media_host
        self.store = store
        self.max_image_bytes = max_image_bytes

    @BaseService.log_performance
    def publish(self, fields: Mapping[str, Any], owner, picture=None) -> ServiceResult[Offer]:
        """
        Publish a new offer.

        Args:
            fields: Raw form fields (title, description, price, brand, size, condition, color, city)
            owner: Resolved identity; becomes the offer's immutable owner
            picture: Optional uploaded file

        Returns:
            ServiceResult with the persisted Offer, or one of the error codes
            validation_error, encoding_error, upload_error, store_error

        Example:
            >>> result = offer_builder.publish(
            ...     {"title": "Blue shirt", "price": "19.90", "brand": "Acme", "city": "Lyon"},
            ...     owner=request.user,
            ...     picture=request.FILES.get("picture"),
            ... )
            >>> if result.ok:
            ...     offer = result.value
        """
        if owner is None or not getattr(owner, "is_authenticated", False):
            return service_err(ErrorCodes.AUTH_ERROR, "An authenticated owner is required")

        serializer = OfferInputSerializer(data=fields)
        if not serializer.is_valid():
            self.logger.info(f"Rejected offer input from {owner.pk}: {dict(serializer.errors)}")
            return service_err(ErrorCodes.VALIDATION_ERROR, "Invalid offer data", errors=serializer.errors)
        data = serializer.validated_data

        product_image = None
        if picture is not None:
            try:
                product_image = self._ingest_picture(picture).to_dict()
            except EncodingError as e:
                self.logger.warning(f"Could not encode picture for offer by {owner.pk}: {e}")
                return service_err(ErrorCodes.ENCODING_ERROR, str(e))
            except UploadError as e:
                self.logger.error(f"Picture upload failed for offer by {owner.pk}: {e}")
                return service_err(ErrorCodes.UPLOAD_ERROR, str(e))

        try:
            offer = self.store.create(
                product_name=data["title"],
                product_description=data["description"],
                product_price=data["price"],
                product_details=Offer.build_details(
                    brand=data["brand"],
                    size=data["size"],
                    condition=data["condition"],
                    color=data["color"],
                    city=data["city"],
                ),
                product_image=product_image,
                owner=owner,
            )
        except StoreError as e:
            return service_err(ErrorCodes.STORE_ERROR, str(e))

        self.logger.info(
            f"Published offer {offer.id} by {owner.pk}: price={offer.product_price}, "
            f"image={'yes' if product_image else 'no'}"
        )
        return service_ok(offer)

    def _ingest_picture(self, picture) -> ImageReference:
        name = getattr(picture, "name", "") or ""
        mime_type = getattr(picture, "content_type", None) or mimetypes.guess_type(name)[0] or ""

        try:
            if hasattr(picture, "seek"):
                picture.seek(0)
            content = picture.read()
        except (OSError, ValueError) as e:
            raise EncodingError(f"Could not read uploaded file: {e}") from e

        return self.media_host.ingest(content, mime_type, max_bytes=self.max_image_bytes)
