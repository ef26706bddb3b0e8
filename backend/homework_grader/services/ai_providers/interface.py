"""
Common interface for all AI/LLM providers.

The grading service talks to the model only through this interface.
Implementations hide provider-specific details (model prefixes, API keys).
"""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class LLMProvider(Protocol):
    """
    Generic LLM provider interface.

    Implementations are created from resolved config (provider, model, api_key,
    temperature, timeout) and expose a single completion method.
    """

    @property
    def model_name(self) -> str:
        """Model string as sent to LiteLLM, e.g. groq/llama-3.2-90b-vision-preview."""
        ...

    async def complete(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        *,
        document_url: Optional[str] = None,
        json_output: bool = False,
        temperature: Optional[float] = None,
        timeout: Optional[int] = None,
    ) -> str:
        """
        Send a prompt to the model and return the generated text.

        Args:
            prompt: User message text.
            system_prompt: Optional system message.
            document_url: Optional URL (or data URI) of a document sent with the user message.
            json_output: Ask the model for a single JSON object.
            temperature: Sampling temperature; implementation default if None.
            timeout: Request timeout in seconds; implementation default if None.

        Returns:
            Model response as plain text.

        Raises:
            UpstreamAuthError: If the API key is missing or rejected.
            UpstreamAPIError: On network or API errors.
        """
        ...
