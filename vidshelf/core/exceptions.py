"""Custom exceptions for the VidShelf application.

All exceptions inherit from VidShelfError for easy catching.

Exception classes include context dictionaries for structured logging
and debugging. Use the `context` property to access additional details.
"""

from typing import Any


class VidShelfError(Exception):
    """Base exception for all VidShelf errors.

    Attributes:
        context: Dictionary with additional error context

    Example:
        >>> try:
        ...     raise VidShelfError("Something went wrong", context={"video_id": "abc"})
        ... except VidShelfError as e:
        ...     print(f"Error: {e}, Context: {e.context}")
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Initialize VidShelfError.

        Args:
            message: Error message
            context: Optional dictionary with additional context
        """
        self.context = context or {}
        super().__init__(message)

    def with_context(self, **kwargs: Any) -> "VidShelfError":
        """Add additional context to the exception.

        Args:
            **kwargs: Key-value pairs to add to context

        Returns:
            Self for method chaining
        """
        self.context.update(kwargs)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for logging/serialization.

        Returns:
            Dictionary with error type, message, and context
        """
        return {
            "error_type": self.__class__.__name__,
            "message": str(self),
            "context": self.context,
        }


# ============================================
# Configuration Errors
# ============================================


class ConfigError(VidShelfError):
    """Base exception for configuration-related errors."""

    def __init__(
        self,
        message: str,
        config_path: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize ConfigError.

        Args:
            message: Error message
            config_path: Path to the config key
            context: Additional context
        """
        ctx = context or {}
        if config_path:
            ctx["config_path"] = config_path
        super().__init__(message, context=ctx)


class ConfigValidationError(ConfigError):
    """Raised when loader options fail validation.

    Attributes:
        errors: Pydantic error list (if available)
    """

    def __init__(
        self,
        message: str,
        errors: list[dict[str, Any]] | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if errors:
            ctx["errors"] = errors
        self.errors = errors or []
        super().__init__(message, context=ctx)


# ============================================
# Gallery Errors
# ============================================


class ContainerNotFoundError(VidShelfError):
    """Raised when the host page has no element with the container id.

    Attributes:
        container_id: The id that was looked up
    """

    def __init__(self, container_id: str, context: dict[str, Any] | None = None) -> None:
        ctx = context or {}
        ctx["container_id"] = container_id
        self.container_id = container_id
        super().__init__(f'Container with id "{container_id}" not found', context=ctx)


class InvalidVideoIdError(VidShelfError):
    """Raised when a video identifier cannot be normalized to a YouTube ID.

    Attributes:
        video_id: The raw identifier
    """

    def __init__(self, video_id: str | None, context: dict[str, Any] | None = None) -> None:
        ctx = context or {}
        ctx["video_id"] = video_id
        self.video_id = video_id
        super().__init__("Invalid video ID", context=ctx)


# ============================================
# Service Errors
# ============================================


class ServiceError(VidShelfError):
    """Base exception for service-related errors."""

    def __init__(
        self,
        message: str,
        service_name: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize ServiceError.

        Args:
            message: Error message
            service_name: Name of the service
            context: Additional context
        """
        ctx = context or {}
        if service_name:
            ctx["service_name"] = service_name
        super().__init__(message, context=ctx)


class CatalogFetchError(ServiceError):
    """Raised when one catalog fetch attempt fails.

    Covers non-success HTTP status, transport errors, malformed JSON and
    documents that do not validate. Recoverable through the retry loop.

    Attributes:
        endpoint: Catalog endpoint that was requested
        status_code: HTTP status code (if a response arrived)
        attempt: Zero-based attempt number
    """

    def __init__(
        self,
        message: str,
        endpoint: str,
        status_code: int | None = None,
        attempt: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize CatalogFetchError.

        Args:
            message: Error message
            endpoint: Catalog endpoint
            status_code: HTTP status code (optional)
            attempt: Attempt number (optional)
            context: Additional context
        """
        ctx = context or {}
        ctx["endpoint"] = endpoint
        if status_code is not None:
            ctx["status_code"] = status_code
        if attempt is not None:
            ctx["attempt"] = attempt

        self.endpoint = endpoint
        self.status_code = status_code
        self.attempt = attempt

        super().__init__(message, service_name="catalog", context=ctx)


__all__ = [
    "CatalogFetchError",
    "ConfigError",
    "ConfigValidationError",
    "ContainerNotFoundError",
    "InvalidVideoIdError",
    "ServiceError",
    "VidShelfError",
]
