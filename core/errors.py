"""Structured error types shared by every platform adapter.

Every error carries the originating platform name and a machine-readable
``code``. Callers that want exhaustive handling can branch on ``code``;
callers that only care about one kind can catch the subclass. The kinds
form a single flat level below ``AdapterError``.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    VALIDATION = "VALIDATION_ERROR"
    DECODING = "DECODING_ERROR"
    TRANSPORT = "TRANSPORT_ERROR"
    RATE_LIMITED = "RATE_LIMITED"
    AUTH_FAILED = "AUTH_FAILED"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    NOT_FOUND = "NOT_FOUND"
    NETWORK = "NETWORK_ERROR"


class AdapterError(Exception):
    """Base error for adapter operations."""

    def __init__(self, message: str, platform: str, code: ErrorCode) -> None:
        super().__init__(message)
        self.message = message
        self.platform = platform
        self.code = code

    def __repr__(self) -> str:
        return f"{type(self).__name__}(platform={self.platform!r}, code={self.code.value}, message={self.message!r})"


class ValidationError(AdapterError):
    """Caller input failed a shape or size check. Never retryable."""

    def __init__(self, platform: str, message: str) -> None:
        super().__init__(message, platform, ErrorCode.VALIDATION)


class DecodingError(AdapterError):
    """An opaque identity token could not be decoded."""

    def __init__(self, platform: str, message: str) -> None:
        super().__init__(message, platform, ErrorCode.DECODING)


class TransportError(AdapterError):
    """Remote API answered with a non-success status."""

    def __init__(self, platform: str, method: str, url: str, status: int, body: str) -> None:
        super().__init__(
            f"{platform} API {method} {url} failed ({status}): {body}",
            platform,
            ErrorCode.TRANSPORT,
        )
        self.method = method
        self.url = url
        self.status = status
        self.body = body


class RateLimitError(AdapterError):
    """Remote API answered 429. Request details are set when raised by an API client."""

    def __init__(
        self,
        platform: str,
        retry_after: Optional[float] = None,
        message: Optional[str] = None,
        *,
        method: Optional[str] = None,
        url: Optional[str] = None,
        status: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        if message is None:
            message = f"Rate limited by {platform}"
            if method and url:
                message += f" on {method} {url}"
            if retry_after:
                message += f", retry after {retry_after:g}s"
        super().__init__(message, platform, ErrorCode.RATE_LIMITED)
        self.retry_after = retry_after
        self.method = method
        self.url = url
        self.status = status
        self.body = body


class AuthenticationError(AdapterError):
    def __init__(self, platform: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"Authentication failed for {platform}", platform, ErrorCode.AUTH_FAILED)


class PermissionDeniedError(AdapterError):
    """The bot lacks a permission. Named to avoid shadowing the builtin."""

    def __init__(self, platform: str, action: str, required_scope: Optional[str] = None) -> None:
        scope_part = f" (requires: {required_scope})" if required_scope else ""
        super().__init__(
            f"Permission denied: cannot {action} in {platform}{scope_part}",
            platform,
            ErrorCode.PERMISSION_DENIED,
        )
        self.action = action
        self.required_scope = required_scope


class ResourceNotFoundError(AdapterError):
    def __init__(self, platform: str, resource_type: str, resource_id: Optional[str] = None) -> None:
        id_part = f" '{resource_id}'" if resource_id else ""
        super().__init__(f"{resource_type}{id_part} not found in {platform}", platform, ErrorCode.NOT_FOUND)
        self.resource_type = resource_type
        self.resource_id = resource_id


class NetworkError(AdapterError):
    """Connectivity failure before any HTTP status was received."""

    def __init__(
        self,
        platform: str,
        message: Optional[str] = None,
        original_error: Optional[BaseException] = None,
    ) -> None:
        super().__init__(
            message or f"Network error communicating with {platform}",
            platform,
            ErrorCode.NETWORK,
        )
        self.original_error = original_error
