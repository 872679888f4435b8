"""
SaaSistent Provider Layer.

Provides prompt-in/text-out access to AI models via LiteLLM.
"""

from saasistent.providers.exceptions import (
    AuthenticationError,
    ContextLengthExceededError,
    EmptyResponseError,
    FailureType,
    InvalidRequestError,
    NetworkError,
    ProviderError,
    RateLimitError,
    ServerError,
    classify_error,
    to_provider_error,
)
from saasistent.providers.manager import (
    ProviderManager,
    clear_provider_manager,
    get_provider_manager,
)
from saasistent.providers.models import (
    CompletionResponse,
    Message,
    TokenUsage,
)

__all__ = [
    # Manager
    "ProviderManager",
    "get_provider_manager",
    "clear_provider_manager",
    # Models
    "Message",
    "CompletionResponse",
    "TokenUsage",
    # Exceptions
    "ProviderError",
    "AuthenticationError",
    "RateLimitError",
    "ContextLengthExceededError",
    "NetworkError",
    "ServerError",
    "InvalidRequestError",
    "EmptyResponseError",
    "FailureType",
    "classify_error",
    "to_provider_error",
]
