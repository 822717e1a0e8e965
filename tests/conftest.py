"""Pytest configuration and shared fixtures."""
import json
from typing import Any

import pytest

from quimibot.llm import LLMProvider, LLMResponse
from quimibot.llm.models import ChatMessage
from quimibot.periodic import ChemicalElement
from quimibot.prompts import clear_cache


class FakeProvider(LLMProvider):
    """Provider returning canned replies and recording every request."""

    def __init__(
        self,
        replies: list[str] | None = None,
        error: Exception | None = None,
        model: str = "fake-model",
    ):
        self.replies = list(replies or [])
        self.error = error
        self.calls: list[dict[str, Any]] = []
        self.closed = False
        self._model = model

    @property
    def model(self) -> str:
        return self._model

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        self.calls.append({
            "messages": list(messages),
            "model": model,
            "temperature": temperature,
            "max_tokens": max_tokens,
        })
        if self.error is not None:
            raise self.error
        content = self.replies.pop(0) if self.replies else ""
        return LLMResponse(content=content, model=model or self._model)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def make_provider():
    """Return the fake provider class for building providers in tests."""
    return FakeProvider


@pytest.fixture(autouse=True)
def fresh_prompts():
    """Prompt files are cached; start and end every test with a clean cache."""
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def element_rows():
    """A few dataset rows using the dataset's camelCase keys."""
    return [
        {"atomicNumber": 80, "symbol": "Hg", "name": "Mercurio", "atomicMass": 200.592,
         "category": "transition-metal", "group": 12, "period": 6, "state": "liquid",
         "electronegativity": 2.0, "meltingPoint": 234.32, "boilingPoint": 629.88,
         "electronConfiguration": "[Xe] 4f14 5d10 6s2", "uses": ["Termómetros"]},
        {"atomicNumber": 1, "symbol": "H", "name": "Hidrógeno", "atomicMass": 1.008,
         "category": "nonmetal", "group": 1, "period": 1, "state": "gas",
         "electronegativity": 2.2, "electronConfiguration": "1s1"},
        {"atomicNumber": 2, "symbol": "He", "name": "Helio", "atomicMass": 4.0026,
         "category": "noble-gas", "group": 18, "period": 1, "state": "gas",
         "electronegativity": 0, "electronConfiguration": "1s2"},
        {"atomicNumber": 11, "symbol": "Na", "name": "Sodio", "atomicMass": 22.99,
         "category": "alkali-metal", "group": 1, "period": 3, "state": "solid",
         "electronegativity": 0.93, "electronConfiguration": "[Ne] 3s1"},
        {"atomicNumber": 26, "symbol": "Fe", "name": "Hierro", "atomicMass": 55.845,
         "category": "transition-metal", "group": 8, "period": 4, "state": "solid",
         "electronegativity": 1.83, "electronConfiguration": "[Ar] 3d6 4s2"},
        {"atomicNumber": 57, "symbol": "La", "name": "Lantano", "atomicMass": 138.905,
         "category": "lanthanide", "group": 0, "period": 6, "state": "solid",
         "electronegativity": 1.1, "electronConfiguration": "[Xe] 5d1 6s2"},
        {"atomicNumber": 79, "symbol": "Au", "name": "Oro", "atomicMass": 196.967,
         "category": "transition-metal", "group": 11, "period": 6, "state": "solid",
         "electronegativity": 2.54, "electronConfiguration": "[Xe] 4f14 5d10 6s1"},
        {"atomicNumber": 47, "symbol": "Ag", "name": "Plata", "atomicMass": 107.868,
         "category": "transition-metal", "group": 11, "period": 5, "state": "solid",
         "electronegativity": 1.93, "electronConfiguration": "[Kr] 4d10 5s1"},
    ]


@pytest.fixture
def elements(element_rows):
    """Validated elements sorted by atomic number."""
    parsed = [ChemicalElement.model_validate(row) for row in element_rows]
    return sorted(parsed, key=lambda el: el.atomic_number)


@pytest.fixture
def by_symbol(elements):
    """Elements keyed by symbol."""
    return {el.symbol: el for el in elements}


@pytest.fixture
def elements_file(tmp_path, element_rows):
    """Write the sample rows to a JSON dataset file."""
    path = tmp_path / "elements.json"
    path.write_text(json.dumps(element_rows, ensure_ascii=False), encoding="utf-8")
    return path
