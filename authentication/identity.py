"""
Identity resolution for write endpoints.

Credentials are verified by the DRF authentication classes configured in
settings (simplejwt Bearer tokens). This module only turns the outcome into an
owner identity or an ``AuthError``; token issuance lives elsewhere.
"""

import logging

from rest_framework import exceptions

logger = logging.getLogger(__name__)


class AuthError(Exception):
    """Raised when a request cannot be resolved to an active identity."""

    pass


class IdentityResolver:
    """Resolve a DRF request to the user that will own what it creates."""

    def resolve(self, request):
        """
        Return the authenticated user behind ``request``.

        Raises:
            AuthError: no credential, an invalid/expired token, or an inactive account
        """
        try:
            user = request.user
        except exceptions.APIException as e:
            detail = e.detail
            if isinstance(detail, dict):
                # simplejwt nests the reason under "detail" next to per-token messages
                detail = detail.get("detail", detail)
            logger.info(f"Rejected credential: {detail}")
            raise AuthError(str(detail)) from e

        if user is None or not getattr(user, "is_authenticated", False):
            raise AuthError("Authentication credentials were not provided.")

        if not getattr(user, "is_active", True):
            raise AuthError("User account is disabled.")

        return user
