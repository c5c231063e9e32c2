# tests/conftest.py
from __future__ import annotations

from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from app.core.skill_rules import load_skill_rules
from app.services.analysis_store import InMemoryAnalysisStore
from app.services.skill_extraction import SkillExtractor


class FakeLLM:
    """Stands in for a LlamaIndex LLM: records prompts, returns canned text."""

    def __init__(self, text: str | None = "", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.prompts: list[str] = []

    async def acomplete(self, prompt: str, **kwargs):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


@pytest.fixture
def rules():
    return load_skill_rules()


@pytest.fixture
def fake_llm():
    return FakeLLM(text="React, SQL, Communication")


@pytest.fixture
def store():
    return InMemoryAnalysisStore()


@pytest.fixture
def extractor(fake_llm, store):
    return SkillExtractor(llm_factory=lambda: fake_llm, store=store)


@pytest.fixture
def client(extractor):
    from app.main import app
    from app.routers.jobs import get_skill_extractor

    app.dependency_overrides[get_skill_extractor] = lambda: extractor
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
