from __future__ import annotations

import re
from typing import Iterable, Sequence

from aiogram.utils.formatting import Italic, Text, Underline

from ..domain.models import CorrectionResult, Fragment

TRANSLATED_BADGE = "Translated to English"
MESSAGE_LIMIT = 4096
ELLIPSIS = "…"


def _term_pattern(term: str) -> re.Pattern[str]:
    return re.compile(rf"(?<!\w){re.escape(term)}(?!\w)")


def _split_fragment(fragment: Fragment, pattern: re.Pattern[str]) -> list[Fragment]:
    parts: list[Fragment] = []
    last = 0
    for match in pattern.finditer(fragment.text):
        if match.start() > last:
            parts.append(Fragment(fragment.text[last:match.start()]))
        parts.append(Fragment(match.group(0), flagged=True))
        last = match.end()
    if last < len(fragment.text):
        parts.append(Fragment(fragment.text[last:]))
    return parts


def _merge_plain(fragments: Iterable[Fragment]) -> list[Fragment]:
    merged: list[Fragment] = []
    for fragment in fragments:
        if merged and not fragment.flagged and not merged[-1].flagged:
            merged[-1] = Fragment(merged[-1].text + fragment.text)
        else:
            merged.append(fragment)
    return merged


def render_fragments(text: str, terms: Sequence[str]) -> list[Fragment]:
    """
    Cut display text into plain and flagged spans.

    Each distinct term flags every whole-word occurrence that is not already part
    of a flagged span, so "cat" never lights up inside "category".
    """
    fragments = [Fragment(text)] if text else []
    for term in dict.fromkeys(terms):
        if not term:
            continue
        pattern = _term_pattern(term)
        updated: list[Fragment] = []
        for fragment in fragments:
            if fragment.flagged:
                updated.append(fragment)
            else:
                updated.extend(_split_fragment(fragment, pattern))
        fragments = updated
    return _merge_plain(fragments)


def plain_text(fragments: Iterable[Fragment]) -> str:
    return "".join(fragment.text for fragment in fragments)


def utf16_length(text: str) -> int:
    """Length as Telegram counts it."""
    return len(text.encode("utf-16-le")) // 2


def fit_fragments(fragments: Sequence[Fragment], budget: int) -> list[Fragment]:
    """Cut fragments down to ``budget`` UTF-16 units, ending with an ellipsis when cut."""
    if utf16_length(plain_text(fragments)) <= budget:
        return list(fragments)

    room = budget - utf16_length(ELLIPSIS)
    fitted: list[Fragment] = []
    for fragment in fragments:
        size = utf16_length(fragment.text)
        if size <= room:
            fitted.append(fragment)
            room -= size
            continue
        head: list[str] = []
        for ch in fragment.text:
            width = utf16_length(ch)
            if width > room:
                break
            head.append(ch)
            room -= width
        if head:
            fitted.append(Fragment("".join(head), fragment.flagged))
        break
    fitted.append(Fragment(ELLIPSIS))
    return _merge_plain(fitted)


def as_telegram_text(
    result: CorrectionResult,
    fragments: Sequence[Fragment],
    *,
    limit: int = MESSAGE_LIMIT,
) -> Text:
    badge = "\n\n" + TRANSLATED_BADGE if result.is_translated else ""
    fitted = fit_fragments(fragments, limit - utf16_length(badge))
    body = [Underline(fragment.text) if fragment.flagged else fragment.text for fragment in fitted]
    if result.is_translated:
        return Text(*body, "\n\n", Italic(TRANSLATED_BADGE))
    return Text(*body)
