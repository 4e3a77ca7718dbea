from __future__ import annotations

import re

RE_UNTRANSLATABLE = re.compile(r"\*\*(.*?)\*\*")


def extract_untranslatable(raw: str) -> tuple[str, tuple[str, ...]]:
    """
    Split model output into display text and flagged terms.

    Every ``**term**`` pair is collected left to right (duplicates kept, one entry
    per occurrence) and the asterisks are dropped while the term stays in place.
    A pair never spans a line break; a lone ``**`` without a partner on its line
    is left as typed.
    """
    terms = tuple(match.group(1) for match in RE_UNTRANSLATABLE.finditer(raw))
    display = RE_UNTRANSLATABLE.sub(r"\1", raw)
    return display, terms
