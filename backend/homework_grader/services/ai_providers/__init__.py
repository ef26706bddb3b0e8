"""
AI provider implementations. The grading service calls the model through the
generic LLM interface via get_llm_provider().complete(...).
"""

from .interface import LLMProvider
from .llm_factory import get_llm_provider, get_llm_provider_for_config, list_llm_provider_names

__all__ = [
    "LLMProvider",
    "get_llm_provider",
    "get_llm_provider_for_config",
    "list_llm_provider_names",
]
