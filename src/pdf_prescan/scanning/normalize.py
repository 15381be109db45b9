# src/pdf_prescan/scanning/normalize.py
from __future__ import annotations

import re
import unicodedata

# Invisible characters PDFs commonly emit inside words/phrases
_NBSP = "\u00a0"
_SOFT_HYPHEN = "\u00ad"

_WS_RE = re.compile(r"\s+", flags=re.UNICODE)


def normalize_text(text: str) -> str:
    """
    Bring scanned text into the same form as normalized terms:
    NFC normalize and drop soft hyphens. Whitespace is left alone.
    """
    if not text:
        return ""
    s = unicodedata.normalize("NFC", text)
    return s.replace(_SOFT_HYPHEN, "")


def normalize_term(term: str) -> str:
    """
    Canonical, human-readable form of a user-supplied term:
      - NFC normalize (compose diacritics),
      - drop soft hyphens, convert non-breaking space to space,
      - collapse runs of whitespace to a single space,
      - strip leading/trailing spaces.
    Case is preserved; matching is case-insensitive anyway.
    """
    if not term:
        return ""
    s = unicodedata.normalize("NFC", term)
    s = s.replace(_SOFT_HYPHEN, "").replace(_NBSP, " ")
    s = _WS_RE.sub(" ", s)
    return s.strip()


def literal_pattern(term: str) -> re.Pattern[str] | None:
    """
    Compile a normalized term into a case-insensitive literal matcher.

    Each space in the term matches any whitespace run, so "John Doe" also
    finds "JOHN\\nDOE" when the extractor broke the line between the words.
    Returns None for an empty term.
    """
    norm = normalize_term(term)
    if not norm:
        return None
    body = r"\s+".join(re.escape(word) for word in norm.split(" "))
    return re.compile(body, flags=re.IGNORECASE | re.UNICODE)
