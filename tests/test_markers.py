from __future__ import annotations

from textassist.modules.text.pipeline.markers import extract_untranslatable


def test_extracts_terms_in_order_and_strips_markers() -> None:
    display, terms = extract_untranslatable("Use **foo** and **bar** please")
    assert terms == ("foo", "bar")
    assert display == "Use foo and bar please"


def test_keeps_duplicate_terms() -> None:
    display, terms = extract_untranslatable("**Zubair** said hi to **Zubair**")
    assert terms == ("Zubair", "Zubair")
    assert display == "Zubair said hi to Zubair"


def test_text_without_markers_is_untouched() -> None:
    display, terms = extract_untranslatable("Nothing flagged here.")
    assert terms == ()
    assert display == "Nothing flagged here."


def test_unpaired_delimiter_is_left_as_typed() -> None:
    display, terms = extract_untranslatable("2 ** 3 equals **eight")
    assert terms == (" 3 equals ",)
    assert display == "2  3 equals eight"


def test_multiword_term() -> None:
    display, terms = extract_untranslatable("We met at **Anarkali Bazaar** yesterday")
    assert terms == ("Anarkali Bazaar",)
    assert display == "We met at Anarkali Bazaar yesterday"


def test_pairs_do_not_span_lines() -> None:
    display, terms = extract_untranslatable("2**3 is eight\nsee **Lahore** here")
    assert terms == ("Lahore",)
    assert display == "2**3 is eight\nsee Lahore here"
