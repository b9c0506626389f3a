from __future__ import annotations

from types import SimpleNamespace

import pytest

import services.synthesis as synthesis
from languages import Language

pytestmark = pytest.mark.anyio

EVENING = {
    "oshikwanyama_word": "onguloshi",
    "english_word": "evening",
    "category": "oonguloshi",
    "word_type": "noun",
    "usage_example_oshikwanyama": "Onguloshi ya wa.",
    "usage_example_english": "A good evening.",
    "detected_dialect": "oshikwanyama",
}


class FakeMessages:
    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def _tool_response(payload):
    block = SimpleNamespace(type="tool_use", name="submit_vault_entry", input=payload)
    return SimpleNamespace(content=[block])


def _install(monkeypatch, *responses) -> FakeMessages:
    messages = FakeMessages(responses)
    monkeypatch.setattr(synthesis, "_get_client", lambda: SimpleNamespace(messages=messages))
    return messages


async def test_synthesize_returns_entry_from_tool_call(monkeypatch):
    messages = _install(monkeypatch, _tool_response(EVENING))

    entry = await synthesis.synthesize("evening", Language.ENGLISH)

    assert entry.oshikwanyama_word == "onguloshi"
    assert entry.detected_dialect == "oshikwanyama"
    assert entry.is_verified is False
    call = messages.calls[0]
    assert call["tool_choice"] == {"type": "tool", "name": "submit_vault_entry"}
    assert "Source: English | Target: Oshikwanyama" in call["messages"][0]["content"]


async def test_synthesize_retries_after_api_error(monkeypatch):
    messages = _install(monkeypatch, ConnectionError("reset"), _tool_response(EVENING))

    entry = await synthesis.synthesize("evening", Language.ENGLISH)

    assert entry is not None
    assert len(messages.calls) == 2


async def test_synthesize_rejects_incomplete_record(monkeypatch):
    _install(monkeypatch, _tool_response({"english_word": "evening"}))
    assert await synthesis.synthesize("evening", Language.ENGLISH, retries=0) is None


async def test_synthesize_without_api_key_returns_none(monkeypatch):
    monkeypatch.setattr(synthesis.settings, "ANTHROPIC_API_KEY", "")
    assert await synthesis.synthesize("evening", Language.ENGLISH) is None
