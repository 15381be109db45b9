from __future__ import annotations

from ..types import ExtractionResult


def has_text_layer(result: ExtractionResult) -> bool:
    """
    True when the extractor saw text items AND they yield non-blank text.

    Items that extract to whitespace only count as no text; so does a
    non-empty string paired with zero reported items.
    """
    return result.total_text_items > 0 and bool(result.text.strip())
