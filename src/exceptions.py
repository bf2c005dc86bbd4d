"""
Centralized exception hierarchy for AI FinTech Insights.

Provides specific exception types for different error scenarios,
enabling consistent HTTP error envelopes and structured error logs.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any

logger = logging.getLogger(__name__)


# =============================================================================
# Base Exception
# =============================================================================


class CatalogError(RuntimeError):
    """
    Base exception for all catalog errors.

    Attributes:
        message: Human-readable error message.
        detail: Additional error details (optional).
        error_code: Machine-readable error code.
        request_id: Unique identifier for the request (optional).
    """

    def __init__(
        self,
        message: str,
        *,
        detail: str | None = None,
        error_code: str | None = None,
        request_id: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail
        self.error_code = error_code or self._default_error_code()
        self.request_id = request_id or self._generate_request_id()

    def _default_error_code(self) -> str:
        """Generate default error code from class name."""
        return f"catalog_{self.__class__.__name__.lower()}"

    def _generate_request_id(self) -> str:
        """Generate request ID if not provided."""
        return str(uuid.uuid4())

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response format."""
        result = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.detail:
            result["detail"] = self.detail
        if self.request_id:
            result["request_id"] = self.request_id
        return result

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message}: {self.detail}"
        return self.message

    def log(self, level: int = logging.ERROR) -> None:
        """Emit one structured record for this error, with its cause's traceback if any."""
        cause = self.__cause__
        logger.log(
            level,
            self.message,
            extra={
                "error_code": self.error_code,
                "detail": self.detail,
                "request_id": self.request_id,
                "exception_type": type(self).__name__,
            },
            exc_info=(type(cause), cause, cause.__traceback__) if cause else None,
        )


# =============================================================================
# Input Validation Errors
# =============================================================================


class ValidationError(CatalogError):
    """
    Raised when input validation fails.

    HTTP Status: 400 Bad Request
    """

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        detail: str | None = None,
        request_id: str | None = None,
    ) -> None:
        self.field = field
        full_message = f"{field}: {message}" if field else message
        super().__init__(
            full_message,
            detail=detail,
            error_code="validation_error",
            request_id=request_id,
        )


class MissingRequiredFieldError(ValidationError):
    """Raised when a required field is missing."""

    def __init__(
        self,
        field_name: str,
        *,
        request_id: str | None = None,
    ) -> None:
        super().__init__(
            message="Missing required field",
            field=field_name,
            detail=f"Field '{field_name}' is required",
            request_id=request_id,
        )


class InvalidDocumentIDError(ValidationError):
    """Raised by a document store when a document id cannot address a document."""

    def __init__(
        self,
        doc_id: str,
        *,
        collection: str | None = None,
        reason: str = "Document id must be a non-empty string without '/'",
        request_id: str | None = None,
    ) -> None:
        super().__init__(
            message="Invalid document ID",
            field="id",
            detail=f"{reason}: {collection + '/' if collection else ''}{doc_id!r}",
            request_id=request_id,
        )
        self.doc_id = doc_id
        self.collection = collection


# =============================================================================
# Not Found Errors
# =============================================================================


class NotFoundError(CatalogError):
    """
    Raised when a requested resource is not found.

    HTTP Status: 404 Not Found
    """

    def __init__(
        self,
        message: str,
        *,
        resource_type: str | None = None,
        resource_id: str | None = None,
        request_id: str | None = None,
    ) -> None:
        self.resource_type = resource_type
        self.resource_id = resource_id
        detail = None
        if resource_type and resource_id:
            detail = f"{resource_type} with ID {resource_id!r} not found"
        super().__init__(
            message,
            detail=detail,
            error_code="not_found",
            request_id=request_id,
        )


class AgentNotFoundError(NotFoundError):
    """Raised when an agent is not found."""

    def __init__(
        self,
        agent_id: str,
        *,
        request_id: str | None = None,
    ) -> None:
        super().__init__(
            message="Agent not found",
            resource_type="Agent",
            resource_id=agent_id,
            request_id=request_id,
        )
        self.agent_id = agent_id


class InsightNotFoundError(NotFoundError):
    """Raised when an insight is not found."""

    def __init__(
        self,
        insight_id: str,
        *,
        request_id: str | None = None,
    ) -> None:
        super().__init__(
            message="Insight not found",
            resource_type="Insight",
            resource_id=insight_id,
            request_id=request_id,
        )
        self.insight_id = insight_id


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(CatalogError):
    """
    Raised when configuration is invalid or missing.

    HTTP Status: 500 Internal Server Error
    """

    def __init__(
        self,
        message: str,
        *,
        setting_name: str | None = None,
        request_id: str | None = None,
    ) -> None:
        self.setting_name = setting_name
        detail = f"Missing or invalid setting: {setting_name}" if setting_name else None
        super().__init__(
            message,
            detail=detail,
            error_code="configuration_error",
            request_id=request_id,
        )


# =============================================================================
# Data Store Errors
# =============================================================================


class DataStoreError(CatalogError):
    """
    Raised when a document store operation fails.

    HTTP Status: 500 Internal Server Error
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        path: str | None = None,
        request_id: str | None = None,
    ) -> None:
        self.operation = operation
        self.path = path
        detail_parts = []
        if operation:
            detail_parts.append(f"Operation: {operation}")
        if path:
            detail_parts.append(f"Path: {path}")
        detail = "; ".join(detail_parts) if detail_parts else None
        super().__init__(
            message,
            detail=detail,
            error_code="data_store_error",
            request_id=request_id,
        )


class DatabaseError(DataStoreError):
    """Raised when the underlying database fails."""

    def __init__(
        self,
        message: str = "Database operation failed",
        *,
        operation: str | None = None,
        table: str | None = None,
        request_id: str | None = None,
    ) -> None:
        self.table = table
        super().__init__(
            message,
            operation=operation,
            path=table,
            request_id=request_id,
        )


class DocumentNotFoundError(DataStoreError):
    """Raised when an update targets a document that does not exist."""

    def __init__(
        self,
        collection: str,
        doc_id: str,
        *,
        request_id: str | None = None,
    ) -> None:
        super().__init__(
            "No document to update",
            operation="update",
            path=f"{collection}/{doc_id}",
            request_id=request_id,
        )
        self.collection = collection
        self.doc_id = doc_id


class TransactionError(DataStoreError):
    """Raised when a transaction is used incorrectly or cannot commit."""

    def __init__(
        self,
        message: str = "Transaction failed",
        *,
        attempts: int | None = None,
        request_id: str | None = None,
    ) -> None:
        super().__init__(
            message,
            operation="transaction",
            request_id=request_id,
        )
        self.attempts = attempts
        if attempts:
            self.detail = f"Operation: transaction; Attempts: {attempts}"


# =============================================================================
# HTTP Exception Helpers
# =============================================================================


def exception_to_http_status(exc: CatalogError) -> int:
    """
    Map exception to appropriate HTTP status code.

    Args:
        exc: The exception to map.

    Returns:
        HTTP status code.
    """
    status_map = {
        ValidationError: 400,
        MissingRequiredFieldError: 400,
        InvalidDocumentIDError: 400,
        NotFoundError: 404,
        AgentNotFoundError: 404,
        InsightNotFoundError: 404,
        DocumentNotFoundError: 404,
        TransactionError: 409,
        ConfigurationError: 500,
        DataStoreError: 500,
        DatabaseError: 500,
    }

    # Most specific class wins
    for exc_class in type(exc).__mro__:
        if exc_class in status_map:
            return status_map[exc_class]
    return 500


# =============================================================================
# Exception Handler for FastAPI
# =============================================================================


def handle_exception(exc: Exception, request_id: str | None = None) -> dict[str, Any]:
    """
    Build the error envelope for `exc`.

    Catalog errors describe themselves. Anything else is logged with its
    traceback and reported as `internal_error` without internal details.
    """
    if isinstance(exc, CatalogError):
        exc.request_id = request_id or exc.request_id
        return exc.to_dict()

    logger.error(
        "unhandled_exception",
        extra={"exception_type": type(exc).__name__, "request_id": request_id},
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    return CatalogError(
        "An unexpected error occurred",
        error_code="internal_error",
        request_id=request_id,
    ).to_dict()
