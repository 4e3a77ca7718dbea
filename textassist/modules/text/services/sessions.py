from __future__ import annotations

import asyncio
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Callable, Dict

from ..domain.interfaces import Notifier
from ..domain.models import Fragment
from .correction import TextCorrectionService
from .debounce import DebouncedCorrector

MAX_REMEMBERED_OUTPUTS = 20


@dataclass
class ChatSession:
    corrector: DebouncedCorrector
    outputs: OrderedDict[int, list[Fragment]] = field(default_factory=OrderedDict)

    def remember(self, message_id: int, fragments: list[Fragment]) -> None:
        self.outputs[message_id] = fragments
        self.outputs.move_to_end(message_id)
        while len(self.outputs) > MAX_REMEMBERED_OUTPUTS:
            self.outputs.popitem(last=False)

    def recall(self, message_id: int) -> list[Fragment] | None:
        return self.outputs.get(message_id)


class SessionRegistry:
    """In-memory per-chat state: one debounced corrector plus recently rendered outputs."""

    def __init__(
        self,
        service: TextCorrectionService,
        *,
        delay: float,
        notifier_factory: Callable[[int], Notifier] | None = None,
    ) -> None:
        self._service = service
        self._delay = delay
        self._notifier_factory = notifier_factory
        self._sessions: Dict[int, ChatSession] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def get(self, chat_id: int) -> ChatSession:
        session = self._sessions.get(chat_id)
        if session is None:
            notifier = self._notifier_factory(chat_id) if self._notifier_factory else None
            corrector = DebouncedCorrector(self._service, delay=self._delay, notifier=notifier)
            session = ChatSession(corrector=corrector)
            self._sessions[chat_id] = session
        return session

    def peek(self, chat_id: int) -> ChatSession | None:
        return self._sessions.get(chat_id)

    async def close(self) -> None:
        sessions = list(self._sessions.values())
        self._sessions.clear()
        await asyncio.gather(*(session.corrector.aclose() for session in sessions))
