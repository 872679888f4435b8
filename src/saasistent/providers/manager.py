"""
Provider manager for SaaSistent.

Main interface for text generation via LiteLLM.
Handles model resolution, error classification and response parsing.
API keys are read by LiteLLM from the usual environment variables
(ANTHROPIC_API_KEY, OPENAI_API_KEY, ...).
"""

import logging
from typing import Any

import litellm
from litellm import acompletion

from saasistent.config.schema import ProviderConfig
from saasistent.providers.exceptions import EmptyResponseError, to_provider_error
from saasistent.providers.models import CompletionResponse, Message, TokenUsage

logger = logging.getLogger(__name__)

# Configure LiteLLM defaults
litellm.drop_params = True  # Drop unsupported params per-provider


class ProviderManager:
    """
    Manages the model provider connection via LiteLLM.

    ``complete_text`` is the prompt-in/text-out capability the generation
    orchestrator and idea expansion depend on.
    """

    def __init__(self, config: ProviderConfig | None = None):
        """
        Initialize the provider manager.

        Args:
            config: Provider configuration. Defaults are used if not provided.
        """
        self.config = config or ProviderConfig()

    def _resolve_model(self, model: str | None) -> str:
        """
        Resolve model name from alias or default.

        Args:
            model: Model name, alias, or None for default.

        Returns:
            The fully resolved model identifier.
        """
        if model is None or model == "default":
            model = self.config.default

        if model in self.config.aliases:
            resolved = self.config.aliases[model]
            logger.debug(f"Resolved alias '{model}' to '{resolved}'")
            return resolved

        return model

    def _extract_provider(self, model: str) -> str:
        """Extract provider name from model string."""
        if "/" in model:
            return model.split("/")[0]
        return "unknown"

    async def complete(
        self,
        messages: list[Message],
        *,
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        **kwargs: Any,
    ) -> CompletionResponse:
        """
        Send a completion request to the provider.

        Args:
            messages: Conversation messages.
            model: Model to use (name, alias, or None for default).
            temperature: Sampling temperature. Defaults to the configured one.
            max_tokens: Maximum tokens in response.
            **kwargs: Additional parameters passed to LiteLLM.

        Returns:
            The parsed completion response.

        Raises:
            ProviderError: Or one of its subclasses, for any provider failure.
        """
        resolved_model = self._resolve_model(model)
        provider = self._extract_provider(resolved_model)

        request_kwargs: dict[str, Any] = {
            "model": resolved_model,
            "messages": [msg.to_dict() for msg in messages],
            "temperature": self.config.temperature if temperature is None else temperature,
            **kwargs,
        }
        if max_tokens:
            request_kwargs["max_tokens"] = max_tokens

        logger.info(f"Completing with model: {resolved_model} (max_tokens={max_tokens})")

        try:
            response = await acompletion(**request_kwargs)
        except Exception as e:
            logger.warning(f"Completion with {resolved_model} failed: {e}")
            raise to_provider_error(e, provider) from e

        return self._parse_response(response, resolved_model)

    def _parse_response(self, response: Any, model: str) -> CompletionResponse:
        """Parse LiteLLM response into unified format."""
        provider = self._extract_provider(model)

        try:
            choice = response.choices[0]
            content = choice.message.content
        except (AttributeError, IndexError, TypeError) as e:
            raise EmptyResponseError(f"Malformed response from {model}: {e}", provider) from e

        if not isinstance(content, str) or not content.strip():
            raise EmptyResponseError(f"{model} returned no text content", provider)

        usage_data = getattr(response, "usage", None)
        usage = TokenUsage(
            input_tokens=getattr(usage_data, "prompt_tokens", 0) or 0,
            output_tokens=getattr(usage_data, "completion_tokens", 0) or 0,
        )

        return CompletionResponse(
            content=content,
            model=model,
            provider=provider,
            usage=usage,
            finish_reason=choice.finish_reason or "unknown",
        )

    async def complete_text(self, prompt: str, max_tokens: int) -> str:
        """
        Complete a single user prompt and return the text.

        Args:
            prompt: The prompt text.
            max_tokens: Output ceiling for this request.

        Returns:
            Generated text (never empty).

        Raises:
            ProviderError: On network, quota, auth or malformed-response failures.
        """
        response = await self.complete([Message.user(prompt)], max_tokens=max_tokens)
        if response.truncated:
            logger.warning(f"Response from {response.model} hit the {max_tokens} token ceiling")
        return response.content

    def get_current_model(self) -> str:
        """Get the model requests are sent to."""
        return self._resolve_model(None)


# Singleton instance
_provider_manager: ProviderManager | None = None


def get_provider_manager(reload: bool = False) -> ProviderManager:
    """
    Get the global provider manager instance.

    Args:
        reload: Force recreation of the manager.

    Returns:
        ProviderManager instance.
    """
    global _provider_manager

    if _provider_manager is None or reload:
        from saasistent.config import get_config

        config = get_config(reload=reload)
        _provider_manager = ProviderManager(config.providers)

    return _provider_manager


def clear_provider_manager() -> None:
    """Clear the global provider manager instance."""
    global _provider_manager
    _provider_manager = None
