"""LLM factory for the extraction capability.

The gateway only needs "prompt in, text out", so it talks to the
LlamaIndex ``LLM`` interface and never to a vendor SDK directly.
Providers:
  - gemini: Google Gemini via llama-index-llms-google-genai (needs GEMINI_API_KEY)
  - ollama: a local Ollama server via llama-index-llms-ollama

Heavy imports happen inside build_llm(), not at module load time.
"""

from __future__ import annotations

import logging
from typing import Optional

from llama_index.core.llms import LLM

from app.core.config import Settings, settings

logger = logging.getLogger(__name__)

SUPPORTED_PROVIDERS = ("gemini", "ollama")


def build_llm(config: Settings = settings) -> LLM:
    """Build the configured LLM. Raises ValueError on bad configuration."""
    provider = config.LLM_PROVIDER
    if provider not in SUPPORTED_PROVIDERS:
        raise ValueError(
            f"Unsupported LLM_PROVIDER {provider!r}; expected one of {SUPPORTED_PROVIDERS}"
        )

    logger.info(
        "Loading LLM: %s via %s", config.LLM_MODEL, provider,
        extra={"provider": provider},
    )

    if provider == "ollama":
        from llama_index.llms.ollama import Ollama

        return Ollama(
            model=config.LLM_MODEL,
            base_url=config.OLLAMA_BASE_URL,
            request_timeout=config.LLM_TIMEOUT,
        )

    if not config.GEMINI_API_KEY:
        raise ValueError("GEMINI_API_KEY is not set")

    from llama_index.llms.google_genai import GoogleGenAI

    return GoogleGenAI(model=config.LLM_MODEL, api_key=config.GEMINI_API_KEY)


# ---------------------------------------------------------------------------
# Module-level singleton, injected into routes via Depends(get_llm)
# ---------------------------------------------------------------------------

_llm: Optional[LLM] = None


def get_llm() -> LLM:
    global _llm
    if _llm is None:
        _llm = build_llm()
    return _llm
