"""
Factory for the generic LLM provider. Builds the implementation from config.yaml and secrets.
"""

from typing import Any, Dict, Optional

from homework_grader.core.config import get_config, get_secrets
from homework_grader.services.ai_providers.interface import LLMProvider
from homework_grader.services.ai_providers.llm_groq import GroqLLMProvider
from homework_grader.services.ai_providers.llm_openai import OpenAILLMProvider

_LLM_PROVIDER_MAP = {
    "groq": GroqLLMProvider,
    "openai": OpenAILLMProvider,
}

# Built once per process, read-only afterwards
_provider: Optional[LLMProvider] = None


def get_resolved_llm_config() -> Dict[str, Any]:
    """
    Return provider, model, temperature, timeout from config.yaml plus the
    matching api_key from the environment.
    """
    llm = get_config().llm
    secrets = get_secrets()
    provider = (llm.provider or "groq").strip().lower()
    api_keys = {
        "groq": secrets.groq_api_key,
        "openai": secrets.openai_api_key,
    }
    return {
        "provider": provider,
        "model": llm.model,
        "temperature": llm.temperature,
        "timeout": llm.timeout,
        "api_key": api_keys.get(provider),
    }


def get_llm_provider_for_config(config: Dict[str, Any]) -> LLMProvider:
    """
    Return an LLM provider instance for the given config dict.
    Config must include: provider, model; api_key, temperature, timeout are optional.
    """
    provider = (config.get("provider") or "groq").strip().lower()
    cls = _LLM_PROVIDER_MAP.get(provider)
    if not cls:
        raise ValueError(
            f"Unknown AI provider: {provider}. "
            f"Available: {', '.join(sorted(_LLM_PROVIDER_MAP.keys()))}"
        )
    return cls(config)


def get_llm_provider() -> LLMProvider:
    """Return the process-wide LLM provider, building it on first use."""
    global _provider
    if _provider is None:
        _provider = get_llm_provider_for_config(get_resolved_llm_config())
    return _provider


def list_llm_provider_names() -> list[str]:
    """Return list of registered LLM provider names (sorted)."""
    return sorted(_LLM_PROVIDER_MAP.keys())
