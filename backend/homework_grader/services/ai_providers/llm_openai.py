"""
OpenAI LLM provider (GPT models). Uses LiteLLM with openai/ model prefix.
"""

from typing import Any, Dict, Optional

from homework_grader.core.errors import UpstreamAuthError
from homework_grader.core.logging import get_logger
from homework_grader.services.ai_providers._litellm import build_messages, completion

logger = get_logger(__name__)


class OpenAILLMProvider:
    """OpenAI provider implementing the generic LLM interface."""

    def __init__(self, config: Dict[str, Any]):
        self._config = config
        self._model = (config.get("model") or "gpt-4o").strip()
        self._api_key = config.get("api_key")
        self._base_url = config.get("base_url")
        self._temperature = config.get("temperature")
        self._timeout = int(config.get("timeout") or 300)

    @property
    def model_name(self) -> str:
        return f"openai/{self._model}"

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
        if not self._api_key:
            raise UpstreamAuthError("No API key configured for provider: openai")
        logger.debug("OpenAI complete: model=%s", self.model_name)
        return await completion(
            model=self.model_name,
            messages=build_messages(prompt, system_prompt, document_url),
            api_key=self._api_key,
            api_base=self._base_url,
            timeout=timeout if timeout is not None else self._timeout,
            temperature=temperature if temperature is not None else self._temperature,
            json_output=json_output,
        )
