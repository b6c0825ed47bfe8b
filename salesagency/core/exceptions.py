"""
Custom exceptions for the Sales Agency API.
Provides consistent error handling across the application.
"""
from fastapi import HTTPException, status


class SalesAgencyException(Exception):
    """Base exception for Sales Agency"""
    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


class NotFoundError(SalesAgencyException):
    """Resource not found"""
    def __init__(self, resource: str = "Resource", resource_id: str = None):
        message = f"{resource} not found"
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        super().__init__(message)


class ValidationError(SalesAgencyException):
    """Validation failed"""
    def __init__(self, message: str = "Validation failed", field: str = None):
        if field:
            message = f"Validation failed for field '{field}': {message}"
        super().__init__(message)


class QueryError(SalesAgencyException):
    """Storage-layer failure, wraps the driver error with context"""
    def __init__(self, context: str = "error executing query", cause: Exception = None):
        message = context
        if cause is not None:
            message = f"{context}: {cause}"
        self.context = context
        self.cause = cause
        super().__init__(message)


class TransactionError(QueryError):
    """A multi-statement transaction failed and was rolled back"""


class DatabaseConnectionError(SalesAgencyException):
    """Database unreachable at startup"""
    def __init__(self, message: str = "failed to connect to database"):
        super().__init__(message)


# HTTP Exception helpers
def raise_not_found(resource: str = "Resource", resource_id: str = None):
    """Raise 404 HTTPException"""
    err = NotFoundError(resource, resource_id)
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=err.message)
