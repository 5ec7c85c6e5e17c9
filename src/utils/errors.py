"""
Custom Exceptions
Errors raised by the financial calculation core.

Each error carries the HTTP status a route handler should map it to.
"""

from http import HTTPStatus
from typing import Optional


class FinancialCalculationError(Exception):
    """Base exception for financial calculation errors."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, detail: str = "Financial calculation failed"):
        super().__init__(detail)
        self.detail = detail


class NotFoundError(FinancialCalculationError):
    """Raised when a record required for the calculation is missing"""

    status_code = HTTPStatus.NOT_FOUND

    def __init__(self, entity: str, entity_id: Optional[object] = None):
        detail = f"{entity} not found" if entity_id is None else f"{entity} {entity_id} not found"
        super().__init__(detail)
        self.entity = entity
        self.entity_id = entity_id


class ValidationError(FinancialCalculationError):
    """Raised when calculation inputs are invalid"""

    status_code = HTTPStatus.UNPROCESSABLE_ENTITY

    def __init__(self, detail: str = "Validation error", errors: Optional[list[str]] = None):
        super().__init__(detail)
        self.errors = errors or []
