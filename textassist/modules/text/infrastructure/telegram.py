from __future__ import annotations

from aiogram import Bot
from aiogram.utils.formatting import Pre, Text

from ..domain.interfaces import Clipboard, Notifier


class ChatNotifier(Notifier):
    def __init__(self, bot: Bot, chat_id: int) -> None:
        self._bot = bot
        self._chat_id = chat_id

    async def notify(self, message: str) -> None:
        await self._bot.send_message(self._chat_id, **Text("⚠️ ", message).as_kwargs())


class ChatClipboard(Clipboard):
    """Sends plain text as a preformatted block, which Telegram clients copy on tap."""

    def __init__(self, bot: Bot, chat_id: int) -> None:
        self._bot = bot
        self._chat_id = chat_id

    async def write_text(self, text: str) -> None:
        await self._bot.send_message(self._chat_id, **Pre(text).as_kwargs())
