# src/pdf_prescan/scanning/baseline.py
from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence

from ..constants import BUILTIN_CATEGORIES
from ..types import Category, ScanCounts
from .normalize import literal_pattern, normalize_term, normalize_text

log = logging.getLogger(__name__)


def count_matches(rx: re.Pattern[str], text: str) -> int:
    """Number of non-overlapping matches of `rx` in `text`."""
    return sum(1 for _ in rx.finditer(text))


def _count_category(category: Category, text: str) -> int:
    # Sub-pattern counts are summed, not deduplicated by span.
    return sum(count_matches(rx, text) for rx in category.patterns)


def _unique_key(key: str, taken: dict[str, int]) -> str:
    """Suffix repeated keys as 'term (2)', 'term (3)', ... in order of appearance."""
    if key not in taken:
        return key
    n = 2
    while f"{key} ({n})" in taken:
        n += 1
    return f"{key} ({n})"


def custom_categories(terms: Iterable[str]) -> list[Category]:
    """
    One literal category per user term, in the order given.

    Terms that normalize to nothing keep their slot, under their repr(),
    but never match.
    """
    out: list[Category] = []
    for term in terms:
        rx = literal_pattern(term)
        patterns = (rx,) if rx is not None else ()
        name = normalize_term(term) or repr(term)
        out.append(Category(name, patterns, "custom term"))
    return out


def scan_baseline(
    text: str,
    custom_terms: Sequence[str] = (),
    categories: Sequence[Category] = BUILTIN_CATEGORIES,
) -> ScanCounts:
    """
    Count potential redactions in `text`.

    Returns an ordered mapping: every built-in category (declaration order),
    then one entry per custom term (given order). Custom terms are counted on
    their own, even where their matches overlap a built-in category.
    """
    # Terms are NFC with soft hyphens dropped; match against the same form
    text = normalize_text(text or "")
    counts: ScanCounts = {}

    for category in [*categories, *custom_categories(custom_terms)]:
        key = _unique_key(category.name, counts)
        counts[key] = _count_category(category, text) if text else 0

    log.debug("Baseline scan over %d chars: %s", len(text), counts)
    return counts
