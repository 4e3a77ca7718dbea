from __future__ import annotations

import asyncio

import pytest

from textassist.modules.text.domain.models import CorrectionResult
from textassist.modules.text.services.correction import FAILURE_NOTICE, TextCorrectionService
from textassist.modules.text.services.debounce import DebouncedCorrector

from .fakes import FailingLLM, RecordingLLM, RecordingNotifier

DELAY = 0.05


@pytest.mark.asyncio
async def test_rapid_changes_issue_single_call_with_last_value() -> None:
    llm = RecordingLLM()
    corrector = DebouncedCorrector(TextCorrectionService(llm), delay=DELAY)

    results = await asyncio.gather(*(corrector.schedule(value) for value in ["h", "he", "hel", "helo"]))

    assert llm.calls == ["helo"]
    assert results[:3] == [None, None, None]
    assert results[3] is not None
    assert results[3].corrected_text == "Helo."


@pytest.mark.asyncio
async def test_waits_for_quiet_period() -> None:
    llm = RecordingLLM()
    corrector = DebouncedCorrector(TextCorrectionService(llm), delay=DELAY)

    task = asyncio.create_task(corrector.schedule("hello"))
    await asyncio.sleep(DELAY / 5)
    assert corrector.pending
    assert llm.calls == []

    result = await task
    assert result is not None
    assert llm.calls == ["hello"]
    assert not corrector.busy


@pytest.mark.asyncio
async def test_blank_input_resolves_immediately_without_call() -> None:
    llm = RecordingLLM()
    corrector = DebouncedCorrector(TextCorrectionService(llm), delay=10)

    result = await asyncio.wait_for(corrector.schedule("   "), timeout=1)

    assert result == CorrectionResult.empty()
    assert llm.calls == []
    assert not corrector.pending


@pytest.mark.asyncio
async def test_clearing_input_cancels_pending_call() -> None:
    llm = RecordingLLM()
    corrector = DebouncedCorrector(TextCorrectionService(llm), delay=DELAY)

    pending = asyncio.create_task(corrector.schedule("draft"))
    await asyncio.sleep(0)
    assert await corrector.schedule("") == CorrectionResult.empty()

    assert await pending is None
    await asyncio.sleep(DELAY * 2)
    assert llm.calls == []


@pytest.mark.asyncio
async def test_stale_response_is_discarded() -> None:
    llm = RecordingLLM(delays={"first": DELAY * 6})
    corrector = DebouncedCorrector(TextCorrectionService(llm), delay=DELAY / 5)

    first = asyncio.create_task(corrector.schedule("first"))
    await asyncio.sleep(DELAY)
    assert llm.calls == ["first"]
    assert corrector.busy

    second = await corrector.schedule("second")
    assert second is not None
    assert second.corrected_text == "Second."

    assert await first is None
    assert llm.calls == ["first", "second"]


@pytest.mark.asyncio
async def test_failure_resolves_with_original_text() -> None:
    notifier = RecordingNotifier()
    llm = FailingLLM()
    corrector = DebouncedCorrector(TextCorrectionService(llm), delay=DELAY / 5, notifier=notifier)

    result = await corrector.schedule("teh text")

    assert result == CorrectionResult.fallback("teh text")
    assert notifier.messages == [FAILURE_NOTICE]
    assert llm.calls == ["teh text"]


@pytest.mark.asyncio
async def test_aclose_releases_waiters() -> None:
    llm = RecordingLLM()
    corrector = DebouncedCorrector(TextCorrectionService(llm), delay=10)

    pending = asyncio.create_task(corrector.schedule("never sent"))
    await asyncio.sleep(0)
    await corrector.aclose()

    assert await pending is None
    assert llm.calls == []
    assert not corrector.busy


@pytest.mark.asyncio
async def test_aclose_cancels_in_flight_dispatch() -> None:
    llm = RecordingLLM(delays={"slow": 10})
    corrector = DebouncedCorrector(TextCorrectionService(llm), delay=0)

    pending = asyncio.create_task(corrector.schedule("slow"))
    await asyncio.sleep(DELAY)
    assert llm.calls == ["slow"]

    await corrector.aclose()
    assert await pending is None
