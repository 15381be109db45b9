# src/pdf_prescan/io/terms.py
from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path

from ..errors import TermsFileError

log = logging.getLogger(__name__)

_LINE_SPLIT_RE = re.compile(r"\r?\n")


def read_terms_file(path: Path) -> list[str]:
    """
    One term per line (UTF-8). Surrounding whitespace is stripped and blank lines
    are skipped. File order is kept.
    """
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TermsFileError(f"cannot read terms file {path}: {e}") from e

    terms = [s.strip() for s in _LINE_SPLIT_RE.split(raw)]
    return [t for t in terms if t]


def collect_terms(inline: Iterable[str] | None, terms_file: Path | None = None) -> list[str]:
    """Inline terms first (given order), then terms from `terms_file`."""
    terms = [t.strip() for t in (inline or []) if t and t.strip()]
    if terms_file is not None:
        file_terms = read_terms_file(terms_file)
        log.debug("Read %d term(s) from %s", len(file_terms), terms_file)
        terms.extend(file_terms)
    return terms
