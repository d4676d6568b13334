from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema, inline_serializer
from rest_framework import serializers, status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.identity import AuthError, IdentityResolver
from infrastructure.container import container
from marketplace.catalog.api.serializers import ErrorResponseSerializer, OfferSerializer
from marketplace.catalog.domain.services import ErrorCodes, OfferBuilder, OfferQueryService, ServiceResult

ERROR_STATUS = {
    ErrorCodes.AUTH_ERROR: status.HTTP_401_UNAUTHORIZED,
    ErrorCodes.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.ENCODING_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.UPLOAD_ERROR: status.HTTP_502_BAD_GATEWAY,
    ErrorCodes.STORE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

LISTING_PARAMETERS = [
    OpenApiParameter(name="title", type=str, description="Case-insensitive substring of the product name"),
    OpenApiParameter(name="priceMin", type=float, description="Minimum price (inclusive)"),
    OpenApiParameter(name="priceMax", type=float, description="Maximum price (inclusive)"),
    OpenApiParameter(name="sort", type=str, enum=["price-asc", "price-desc"], description="Sort by price"),
    OpenApiParameter(name="page", type=int, description="Page number (1-indexed)"),
    OpenApiParameter(name="limit", type=int, description="Page size"),
]


def error_response(result: ServiceResult) -> Response:
    body = {"message": result.error_detail}
    if result.errors:
        body["errors"] = result.errors
    return Response(body, status=ERROR_STATUS.get(result.error, status.HTTP_500_INTERNAL_SERVER_ERROR))


class OfferPublishView(APIView):
    """
    Publish an offer for the authenticated seller.

    Authentication is resolved explicitly through IdentityResolver so that a
    rejected credential never reaches the builder.
    """

    permission_classes = [AllowAny]
    parser_classes = [MultiPartParser, FormParser, JSONParser]
    identity_resolver = IdentityResolver()

    def get_service(self) -> OfferBuilder:
        return container.offer_builder()

    def perform_authentication(self, request):
        # Deferred to IdentityResolver in post()
        pass

    @extend_schema(
        operation_id="offer_publish",
        summary="Publish an offer",
        description="Multipart form with the offer fields and an optional `picture` file.",
        request={
            "multipart/form-data": inline_serializer(
                name="OfferPublishRequest",
                fields={
                    "title": serializers.CharField(required=False),
                    "description": serializers.CharField(required=False),
                    "price": serializers.DecimalField(max_digits=10, decimal_places=2),
                    "brand": serializers.CharField(required=False),
                    "size": serializers.CharField(required=False),
                    "condition": serializers.CharField(required=False),
                    "color": serializers.CharField(required=False),
                    "city": serializers.CharField(required=False),
                    "picture": serializers.ImageField(required=False),
                },
            )
        },
        responses={
            201: OfferSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid fields or picture"),
            401: OpenApiResponse(response=ErrorResponseSerializer, description="Missing or invalid credentials"),
            500: OpenApiResponse(response=ErrorResponseSerializer, description="Offer could not be saved"),
            502: OpenApiResponse(response=ErrorResponseSerializer, description="Picture upload failed"),
        },
        tags=["Offers"],
    )
    def post(self, request):
        try:
            owner = self.identity_resolver.resolve(request)
        except AuthError as e:
            response = Response({"message": str(e)}, status=status.HTTP_401_UNAUTHORIZED)
            authenticate_header = self.get_authenticate_header(request)
            if authenticate_header:
                response["WWW-Authenticate"] = authenticate_header
            return response

        picture = request.FILES.get("picture")
        result = self.get_service().publish(request.data, owner, picture)

        if not result.ok:
            return error_response(result)

        return Response(OfferSerializer(result.value).data, status=status.HTTP_201_CREATED)


class OfferListView(APIView):
    """
    Browse and search offers.

    Both listing routes use this view; ``default_params`` and ``fields`` are
    set per route in urls.py.
    """

    permission_classes = [AllowAny]
    authentication_classes = []
    default_params = {}
    fields = None

    def get_service(self) -> OfferQueryService:
        return container.offer_query_service()

    @extend_schema(
        operation_id="offers_list",
        summary="List offers",
        description="Filter by title and price range, sort by price, optionally paginate.",
        parameters=LISTING_PARAMETERS,
        responses={
            200: OfferSerializer(many=True),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid query parameter"),
            500: OpenApiResponse(response=ErrorResponseSerializer, description="Offers could not be read"),
        },
        tags=["Offers"],
    )
    def get(self, request):
        model_fields = OfferSerializer.model_fields_for(self.fields) if self.fields else None

        result = self.get_service().search(request.query_params, defaults=self.default_params, fields=model_fields)

        if not result.ok:
            return error_response(result)

        serializer = OfferSerializer(result.value, many=True, fields=self.fields)
        return Response(serializer.data, status=status.HTTP_200_OK)
