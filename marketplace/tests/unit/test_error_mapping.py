import pytest
from rest_framework import status

from marketplace.catalog.api.serializers import offer_serializers
from marketplace.catalog.api.views import offer_views
from marketplace.catalog.domain.services import ErrorCodes, service_err


def error_codes():
    return {value for name, value in vars(ErrorCodes).items() if name.isupper()}


@pytest.mark.unit
class TestErrorMapping:
    def test_every_error_code_has_a_status(self):
        assert set(offer_views.ERROR_STATUS) == error_codes()

    @pytest.mark.parametrize(
        "code, expected",
        [
            (ErrorCodes.AUTH_ERROR, status.HTTP_401_UNAUTHORIZED),
            (ErrorCodes.VALIDATION_ERROR, status.HTTP_400_BAD_REQUEST),
            (ErrorCodes.ENCODING_ERROR, status.HTTP_400_BAD_REQUEST),
            (ErrorCodes.UPLOAD_ERROR, status.HTTP_502_BAD_GATEWAY),
            (ErrorCodes.STORE_ERROR, status.HTTP_500_INTERNAL_SERVER_ERROR),
        ],
    )
    def test_error_response(self, code, expected):
        response = offer_views.error_response(service_err(code, "Something went wrong"))

        assert response.status_code == expected
        assert response.data == {"message": "Something went wrong"}

    def test_validation_errors_are_included(self):
        result = service_err(ErrorCodes.VALIDATION_ERROR, "Invalid offer data", errors={"price": ["Required"]})

        response = offer_views.error_response(result)

        assert response.data == {"message": "Invalid offer data", "errors": {"price": ["Required"]}}

    def test_api_modules_keep_no_idle_loggers(self):
        assert not hasattr(offer_views, "logger")
        assert not hasattr(offer_serializers, "logger")
