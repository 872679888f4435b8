"""
Provider exceptions for SaaSistent.

Defines the errors a text-generation call can fail with and a classifier
that maps LiteLLM exceptions onto them.
"""

from enum import Enum


class FailureType(Enum):
    """Classification of provider failures."""

    RATE_LIMIT = "rate_limit"
    AUTH_ERROR = "auth_error"
    NETWORK_ERROR = "network_error"
    SERVER_ERROR = "server_error"
    CONTEXT_LENGTH = "context_length"
    INVALID_REQUEST = "invalid_request"
    EMPTY_RESPONSE = "empty_response"
    UNKNOWN = "unknown"


class ProviderError(Exception):
    """Base exception for provider errors."""

    def __init__(self, message: str, provider: str | None = None):
        super().__init__(message)
        self.provider = provider


class AuthenticationError(ProviderError):
    """API key invalid or missing."""

    pass


class RateLimitError(ProviderError):
    """Provider rate limit exceeded."""

    def __init__(
        self,
        message: str,
        provider: str | None = None,
        retry_after: int | None = None,
    ):
        super().__init__(message, provider)
        self.retry_after = retry_after


class ContextLengthExceededError(ProviderError):
    """Request exceeded the model's context length."""

    pass


class NetworkError(ProviderError):
    """Network-related error (connection, timeout, etc.)."""

    pass


class ServerError(ProviderError):
    """Provider server error (5xx status codes)."""

    pass


class InvalidRequestError(ProviderError):
    """Invalid request sent to provider."""

    pass


class EmptyResponseError(ProviderError):
    """Provider answered without any text content."""

    pass


_FAILURE_ERRORS: dict[FailureType, type[ProviderError]] = {
    FailureType.RATE_LIMIT: RateLimitError,
    FailureType.AUTH_ERROR: AuthenticationError,
    FailureType.NETWORK_ERROR: NetworkError,
    FailureType.SERVER_ERROR: ServerError,
    FailureType.CONTEXT_LENGTH: ContextLengthExceededError,
    FailureType.INVALID_REQUEST: InvalidRequestError,
    FailureType.EMPTY_RESPONSE: EmptyResponseError,
}


def classify_error(error: Exception) -> FailureType:
    """
    Classify an exception into a failure type.

    Args:
        error: The exception to classify.

    Returns:
        The failure type classification.
    """
    from litellm.exceptions import (
        APIConnectionError,
        APIError,
        AuthenticationError as LiteLLMAuthError,
        ContextWindowExceededError,
        RateLimitError as LiteLLMRateLimitError,
        ServiceUnavailableError,
        Timeout,
    )

    # Context window errors subclass BadRequestError, check them first
    if isinstance(error, ContextWindowExceededError):
        return FailureType.CONTEXT_LENGTH
    elif isinstance(error, LiteLLMRateLimitError):
        return FailureType.RATE_LIMIT
    elif isinstance(error, LiteLLMAuthError):
        return FailureType.AUTH_ERROR
    elif isinstance(error, (APIConnectionError, ServiceUnavailableError, Timeout)):
        return FailureType.NETWORK_ERROR
    elif isinstance(error, APIError):
        status = getattr(error, "status_code", None)
        if status and 500 <= status < 600:
            return FailureType.SERVER_ERROR
        elif status and 400 <= status < 500:
            return FailureType.INVALID_REQUEST
        return FailureType.UNKNOWN

    for failure_type, error_class in _FAILURE_ERRORS.items():
        if isinstance(error, error_class):
            return failure_type

    if isinstance(error, (ConnectionError, TimeoutError)):
        return FailureType.NETWORK_ERROR

    return FailureType.UNKNOWN


def to_provider_error(error: Exception, provider: str | None = None) -> ProviderError:
    """
    Wrap an arbitrary exception in the matching ProviderError subclass.

    ProviderErrors pass through unchanged.
    """
    if isinstance(error, ProviderError):
        return error

    error_class = _FAILURE_ERRORS.get(classify_error(error), ProviderError)
    wrapped = error_class(str(error) or type(error).__name__, provider)
    wrapped.__cause__ = error
    return wrapped
