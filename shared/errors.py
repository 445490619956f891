"""
Shared error handling for the cache facade.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    code: str
    message: str
    details: Dict[str, Any] = {}


class CacheError(Exception):
    """Base exception for cache facade errors."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            code=self.code,
            message=self.message,
            details=self.details
        )


class InvalidKey(CacheError):
    """Cache key is empty or not a string."""

    def __init__(self, message: str = "Invalid cache key", details: Optional[Dict[str, Any]] = None):
        super().__init__("INVALID_KEY", message, details)


class InvalidExpiration(CacheError):
    """Expiration is not a non-negative number of seconds."""

    def __init__(self, message: str = "Invalid expiration", details: Optional[Dict[str, Any]] = None):
        super().__init__("INVALID_EXPIRATION", message, details)


class StoreError(CacheError):
    """Underlying store failures."""

    def __init__(
        self,
        store: str,
        message: str = "Store error",
        details: Optional[Dict[str, Any]] = None,
        code: str = "STORE_ERROR",
    ):
        super().__init__(code, f"{store}: {message}", details)


class ConfigurationError(CacheError):
    """Configuration-related errors."""

    def __init__(self, message: str = "Invalid configuration", details: Optional[Dict[str, Any]] = None):
        super().__init__("CONFIGURATION_ERROR", message, details)
