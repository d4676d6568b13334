"""
Base classes and utilities for the service layer.

This module provides the ServiceResult pattern and the BaseService class that
the offer services build on. Services catch the exceptions raised by their
collaborators and report them as error codes; views map codes to HTTP status.
"""

import logging
import time
from dataclasses import dataclass
from functools import wraps
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class ServiceResult(Generic[T]):
    """
    A result type that encapsulates success or failure from service operations.

    Attributes:
        ok: True if operation succeeded, False otherwise
        value: The success value (present if ok=True)
        error: Error code (present if ok=False), one of ErrorCodes
        error_detail: Human-readable error message (present if ok=False)
        errors: Optional field-level details for validation failures

    Examples:
        >>> result = service_ok(offer)
        >>> if result.ok:
        ...     return Response(OfferSerializer(result.value).data, 201)

        >>> result = service_err(ErrorCodes.UPLOAD_ERROR, "Image upload timed out after 30s")
        >>> print(result.error)  # "upload_error"
    """

    ok: bool
    value: Optional[T] = None
    error: Optional[str] = None
    error_detail: Optional[str] = None
    errors: Optional[Dict[str, Any]] = None


def service_ok(value: T) -> ServiceResult[T]:
    """
    Create a successful ServiceResult.

    Args:
        value: The success value

    Returns:
        ServiceResult with ok=True and the value
    """
    return ServiceResult(ok=True, value=value)


def service_err(error: str, error_detail: str = "", errors: Optional[Dict[str, Any]] = None) -> ServiceResult:
    """
    Create a failed ServiceResult.

    Args:
        error: Error code (e.g., "validation_error", "upload_error")
        error_detail: Human-readable error message
        errors: Optional per-field error details

    Returns:
        ServiceResult with ok=False and error information
    """
    return ServiceResult(ok=False, error=error, error_detail=error_detail or error, errors=errors or None)


class BaseService:
    """
    Base class for offer services providing common functionality.

    Provides:
    - Logging with class name
    - Performance timing decorator

    Usage:
        class OfferQueryService(BaseService):
            def __init__(self, store, planner):
                super().__init__()
                self.store = store

            @BaseService.log_performance
            def search(self, params):
                self.logger.info(f"Searching offers: {params}")
    """

    def __init__(self):
        """Initialize base service with logger."""
        self.logger = logging.getLogger(self.__class__.__module__ + "." + self.__class__.__name__)

    @staticmethod
    def log_performance(func: Callable) -> Callable:
        """
        Decorator to log performance of service methods.

        Logs execution time and the outcome of the wrapped call.
        """

        @wraps(func)
        def wrapper(self, *args, **kwargs):
            start_time = time.time()
            method_name = f"{self.__class__.__name__}.{func.__name__}"

            try:
                self.logger.debug(f"{method_name} started")
                result = func(self, *args, **kwargs)
                elapsed_time = (time.time() - start_time) * 1000  # Convert to ms

                if isinstance(result, ServiceResult):
                    if result.ok:
                        self.logger.info(f"{method_name} completed successfully in {elapsed_time:.2f}ms")
                    else:
                        self.logger.warning(
                            f"{method_name} failed with error '{result.error}' in {elapsed_time:.2f}ms"
                        )
                else:
                    self.logger.info(f"{method_name} completed in {elapsed_time:.2f}ms")

                return result

            except Exception as e:
                elapsed_time = (time.time() - start_time) * 1000
                self.logger.error(
                    f"{method_name} raised exception after {elapsed_time:.2f}ms: {str(e)}",
                    exc_info=True,
                )
                raise

        return wrapper


class ErrorCodes:
    """Error codes reported by the offer services."""

    AUTH_ERROR = "auth_error"
    VALIDATION_ERROR = "validation_error"
    ENCODING_ERROR = "encoding_error"
    UPLOAD_ERROR = "upload_error"
    STORE_ERROR = "store_error"
