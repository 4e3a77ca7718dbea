from __future__ import annotations

import pytest

from textassist.modules.text.domain.models import CorrectionResult
from textassist.modules.text.services.correction import FAILURE_NOTICE, TextCorrectionService

from .fakes import FailingLLM, RecordingLLM, RecordingNotifier


@pytest.mark.asyncio
@pytest.mark.parametrize("text", ["", "   ", "\n\t "])
async def test_blank_input_skips_model(text: str) -> None:
    llm = RecordingLLM()
    result = await TextCorrectionService(llm).process(text)
    assert result == CorrectionResult(corrected_text="", is_translated=False, untranslatable_words=())
    assert llm.calls == []


@pytest.mark.asyncio
async def test_response_is_classified() -> None:
    llm = RecordingLLM({"mujhe **Lahore** jana hai": "I have to go to **Lahore**"})
    result = await TextCorrectionService(llm).process("mujhe **Lahore** jana hai")
    assert result.corrected_text == "I have to go to Lahore"
    assert result.untranslatable_words == ("Lahore",)


@pytest.mark.asyncio
async def test_failure_falls_back_to_original_and_notifies_once() -> None:
    notifier = RecordingNotifier()
    service = TextCorrectionService(FailingLLM())
    result = await service.process("teh original text", notifier=notifier)
    assert result == CorrectionResult.fallback("teh original text")
    assert result.corrected_text == "teh original text"
    assert result.is_translated is False
    assert result.untranslatable_words == ()
    assert notifier.messages == [FAILURE_NOTICE]


@pytest.mark.asyncio
async def test_notifier_failure_does_not_escape() -> None:
    notifier = RecordingNotifier(fail=True)
    result = await TextCorrectionService(FailingLLM()).process("hello", notifier=notifier)
    assert result.corrected_text == "hello"
    assert notifier.messages == [FAILURE_NOTICE]


@pytest.mark.asyncio
async def test_malformed_response_yields_empty_text() -> None:
    llm = RecordingLLM({"hello": ""})
    result = await TextCorrectionService(llm).process("hello")
    assert result.corrected_text == ""
    assert result.untranslatable_words == ()
