# leadfolder/llm.py
from __future__ import annotations

import logging
from typing import Dict, Optional

from openai import OpenAI
from openai import APIError, APIConnectionError, RateLimitError

from leadfolder.errors import MissingCredentialError, UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4.1-mini"

_clients: Dict[str, OpenAI] = {}


def _get_client(api_key: Optional[str]) -> OpenAI:
    if not api_key:
        raise MissingCredentialError("OPENAI_API_KEY is not set on the server.")
    client = _clients.get(api_key)
    if client is None:
        client = OpenAI(api_key=api_key)
        _clients[api_key] = client
    return client


def generate_markdown(
    system: str,
    user: str,
    *,
    api_key: Optional[str],
    model: Optional[str] = None,
    temperature: float = 0.4,
) -> str:
    """
    Call the chat model and return Markdown text (stripped, possibly empty).

    Raises MissingCredentialError when no key is configured and UpstreamError
    when the provider call fails.
    """
    client = _get_client(api_key)
    model_name = model or DEFAULT_MODEL

    try:
        resp = client.chat.completions.create(
            model=model_name,
            temperature=temperature,
            messages=[
                {"role": "system", "content": system},
                {"role": "user",   "content": user},
            ],
        )
    except (APIConnectionError, RateLimitError, APIError) as e:
        logger.error("OpenAI error: %s", e)
        raise UpstreamError(f"OpenAI API error: {e}") from e

    content = resp.choices[0].message.content if resp.choices and resp.choices[0].message else ""
    return (content or "").strip()
