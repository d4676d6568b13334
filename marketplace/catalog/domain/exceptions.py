from typing import Any, Dict, Optional


class QueryValidationError(Exception):
    """Raised when a search parameter cannot be parsed (e.g. a non-numeric price)."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field

    @property
    def errors(self) -> Dict[str, Any]:
        return {self.field: [str(self)]} if self.field else {}


class StoreError(Exception):
    """Raised when the offer store fails to read or write."""

    pass
