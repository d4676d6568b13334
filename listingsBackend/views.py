"""Site-level views: the welcome banner and the JSON not-found handler."""

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

WELCOME_MESSAGE = "Welcome to the offers server!"
NOT_FOUND_MESSAGE = "You seem to be lost 👀"


@extend_schema(operation_id="welcome", summary="Welcome message", tags=["Health"])
@api_view(["GET"])
@permission_classes([AllowAny])
def welcome(request):
    return Response(WELCOME_MESSAGE, status=status.HTTP_200_OK)


@csrf_exempt
def not_found(request, exception=None, **kwargs):
    return JsonResponse(NOT_FOUND_MESSAGE, status=404, safe=False, json_dumps_params={"ensure_ascii": False})
