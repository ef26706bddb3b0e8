"""
Internal helper for LiteLLM-based provider implementations.
Do not import from outside ai_providers package.
"""

from typing import Any, Dict, List, Optional

import litellm

from homework_grader.core.errors import UpstreamAPIError, UpstreamAuthError


def build_messages(
    prompt: str,
    system_prompt: Optional[str] = None,
    document_url: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """
    Build chat messages. With a document the user message becomes a content
    list of a text part and an image_url part.
    """
    messages: List[Dict[str, Any]] = []
    if system_prompt:
        messages.append({"role": "system", "content": system_prompt})
    if document_url:
        messages.append(
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": prompt},
                    {"type": "image_url", "image_url": {"url": document_url}},
                ],
            }
        )
    else:
        messages.append({"role": "user", "content": prompt})
    return messages


async def completion(
    model: str,
    messages: List[Dict[str, Any]],
    *,
    api_key: Optional[str] = None,
    api_base: Optional[str] = None,
    timeout: int = 300,
    temperature: Optional[float] = None,
    json_output: bool = False,
) -> str:
    """
    Run LiteLLM acompletion with the given model and messages.

    Args:
        model: LiteLLM model string (e.g. groq/llama-3.2-90b-vision-preview, openai/gpt-4o).
        messages: Chat messages, see build_messages.
        api_key: Provider API key.
        api_base: Optional base URL for OpenAI-compatible endpoints.
        timeout: Request timeout in seconds.
        temperature: Optional sampling temperature.
        json_output: Request response_format={"type": "json_object"}.

    Returns:
        Response content string.
    """
    kwargs: Dict[str, Any] = {
        "model": model,
        "messages": messages,
        "timeout": timeout,
    }
    if api_base:
        kwargs["api_base"] = api_base
    if api_key:
        kwargs["api_key"] = api_key
    if temperature is not None:
        kwargs["temperature"] = temperature
    if json_output:
        kwargs["response_format"] = {"type": "json_object"}

    try:
        response = await litellm.acompletion(**kwargs)
    except litellm.AuthenticationError as e:
        raise UpstreamAuthError(f"LLM authentication failed: {e}", cause=e) from e
    except Exception as e:
        raise UpstreamAPIError(f"LLM request failed: {e}", cause=e) from e
    return response.choices[0].message.content
