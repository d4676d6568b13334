"""
DRF exception handler that shapes every error as ``{"message": ...}``.

Framework-level failures (bad credentials, unparsable bodies) then look the
same to clients as the errors the offer services report. A route is matched
on method and path together, so a known path hit with another method gets the
same not-found answer as an unknown path.
"""

import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from listingsBackend.views import NOT_FOUND_MESSAGE


logger = logging.getLogger(__name__)


def message_exception_handler(exc, context):
    if isinstance(exc, exceptions.MethodNotAllowed):
        return Response(NOT_FOUND_MESSAGE, status=status.HTTP_404_NOT_FOUND)

    response = exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.error(f"Unhandled error in {type(view).__name__}: {exc}", exc_info=exc)
        return Response({"message": "Internal server error"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    data = response.data
    if isinstance(data, dict) and "detail" in data:
        response.data = {"message": str(data["detail"])}
    else:
        response.data = {"message": "Invalid request", "errors": data}
    return response
