"""Application configuration loaded from environment variables.

  - LLM_PROVIDER   → "gemini" (default) or "ollama"
  - GEMINI_API_KEY → the only secret; required when the provider is gemini
  - SKILL_RULES_PATH → optional override of the bundled skill_rules.json
"""

from __future__ import annotations

import os


class Settings:
    # External text-generation capability
    LLM_PROVIDER: str = os.getenv("LLM_PROVIDER", "gemini").lower()
    LLM_MODEL: str = os.getenv(
        "LLM_MODEL",
        "llama3.1:8b" if LLM_PROVIDER == "ollama" else "gemini-2.5-flash",
    )
    GEMINI_API_KEY: str | None = os.getenv("GEMINI_API_KEY")
    OLLAMA_BASE_URL: str = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")
    LLM_TIMEOUT: float = float(os.getenv("LLM_TIMEOUT", "120"))

    # Matching and scoring heuristics
    SKILL_RULES_PATH: str | None = os.getenv("SKILL_RULES_PATH")

    # Request limits
    MAX_DESCRIPTION_LENGTH: int = int(os.getenv("MAX_DESCRIPTION_LENGTH", "20000"))


settings = Settings()
