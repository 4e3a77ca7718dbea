from __future__ import annotations

import asyncio
import logging
from typing import Optional

from ..domain.interfaces import Notifier
from ..domain.models import CorrectionResult
from .correction import TextCorrectionService

logger = logging.getLogger(__name__)

_Waiter = asyncio.Future[Optional[CorrectionResult]]


class DebouncedCorrector:
    """
    Turns a stream of input values into at most one correction call per quiet period.

    ``schedule`` resolves to the result for the latest value, or ``None`` when the
    call was superseded: either a newer value arrived before the timer fired, or a
    newer dispatch was issued while this one was still in flight.
    """

    def __init__(
        self,
        service: TextCorrectionService,
        *,
        delay: float = 0.5,
        notifier: Notifier | None = None,
    ) -> None:
        self._service = service
        self._delay = delay
        self._notifier = notifier
        self._timer: asyncio.TimerHandle | None = None
        self._waiter: _Waiter | None = None
        self._sequence = 0
        self._in_flight: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> bool:
        return self._timer is not None

    @property
    def busy(self) -> bool:
        return self.pending or bool(self._in_flight)

    @property
    def sequence(self) -> int:
        return self._sequence

    async def schedule(self, text: str) -> CorrectionResult | None:
        self._cancel_pending()
        self._sequence += 1

        if not text.strip():
            return CorrectionResult.empty()

        loop = asyncio.get_running_loop()
        waiter: _Waiter = loop.create_future()
        self._waiter = waiter
        self._timer = loop.call_later(self._delay, self._fire, text, self._sequence, waiter)
        return await waiter

    async def aclose(self) -> None:
        self._cancel_pending()
        tasks = list(self._in_flight)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self._in_flight.clear()

    def _cancel_pending(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        if self._waiter is not None and not self._waiter.done():
            self._waiter.set_result(None)
        self._waiter = None

    def _fire(self, text: str, sequence: int, waiter: _Waiter) -> None:
        self._timer = None
        self._waiter = None
        if waiter.done():
            return
        task = asyncio.create_task(self._dispatch(text, sequence, waiter))
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)

    async def _dispatch(self, text: str, sequence: int, waiter: _Waiter) -> None:
        try:
            result = await self._service.process(text, notifier=self._notifier)
        except asyncio.CancelledError:
            if not waiter.done():
                waiter.set_result(None)
            raise
        except Exception as exc:  # noqa: BLE001
            if not waiter.done():
                waiter.set_exception(exc)
            return

        if waiter.done():
            return
        if sequence != self._sequence:
            logger.debug("Dropping stale correction #%s (latest is #%s)", sequence, self._sequence)
            waiter.set_result(None)
            return
        waiter.set_result(result)
