from __future__ import annotations

import logging
from typing import Iterable

from ..domain.interfaces import Clipboard
from ..domain.models import Fragment
from ..pipeline.rendering import plain_text

logger = logging.getLogger(__name__)


async def copy_plain_text(fragments: Iterable[Fragment], clipboard: Clipboard) -> bool:
    text = plain_text(fragments)
    if not text:
        return False
    try:
        await clipboard.write_text(text)
    except Exception:
        logger.exception("Failed to copy text")
        return False
    return True
