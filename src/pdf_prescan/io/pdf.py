# src/pdf_prescan/io/pdf.py
"""
Text-layer extraction for a single PDF via pdfminer.six.

Each page is laid out, every text line (LTTextLine) is counted as one text
item, including lines that come out blank, and the cleaned non-blank lines are
joined into the page text. Figures are descended into because some producers
wrap whole pages of text in a Form XObject.

Public API:
    - extract_pdf_text(path: str | os.PathLike) -> ExtractionResult
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

# pdfminer.six
from pdfminer.high_level import extract_pages
from pdfminer.layout import (
    LTFigure,
    LTLayoutContainer,
    LTPage,
    LTTextBox,
    LTTextBoxHorizontal,
    LTTextContainer,
    LTTextLine,
    LTTextLineHorizontal,
)
from pdfminer.pdfdocument import PDFTextExtractionNotAllowed

from ..errors import ExtractionError
from ..types import ExtractionResult

__all__ = ["extract_pdf_text"]

log = logging.getLogger(__name__)

# ------------------------------- Typing ------------------------------------ #

_PathLike = str | bytes | os.PathLike[str]


def _to_str_path(p: _PathLike) -> str:
    s = os.fspath(p)
    return s if isinstance(s, str) else s.decode()  # utf-8


# ------------------------------- Utilities --------------------------------- #


def _clean_text(s: str) -> str:
    s = s.replace("\u00a0", " ")
    s = s.replace("\t", " ")
    s = s.strip()
    while "  " in s:
        s = s.replace("  ", " ")
    return s


def _iter_lines(layout: LTLayoutContainer) -> Iterator[str]:
    """Yield the cleaned text of every text line, blank ones included."""
    for element in layout:
        if isinstance(element, LTTextBox | LTTextBoxHorizontal | LTTextContainer):
            for obj in element:
                if isinstance(obj, LTTextLine | LTTextLineHorizontal):
                    yield _clean_text(obj.get_text())
        elif isinstance(element, LTFigure):
            yield from _iter_lines(element)
        # ignore drawing primitives


# ------------------------------ Public API --------------------------------- #


def extract_pdf_text(path: _PathLike) -> ExtractionResult:
    """
    Extract the text layer of `path`.

    Raises ExtractionError (chained to the pdfminer error) when the file
    cannot be parsed or text extraction is not allowed. No partial results.
    """
    file_path = _to_str_path(path)
    num_pages = 0
    total_items = 0
    pages: list[str] = []

    try:
        for layout in extract_pages(file_path):
            if not isinstance(layout, LTPage):
                continue
            num_pages += 1
            lines = list(_iter_lines(layout))
            total_items += len(lines)
            pages.append("\n".join(ln for ln in lines if ln))
    except PDFTextExtractionNotAllowed as e:
        raise ExtractionError(f"text extraction not allowed for {file_path}") from e
    except Exception as e:  # noqa: BLE001
        raise ExtractionError(f"could not parse PDF {file_path}: {e}") from e

    log.debug("Extracted %s: pages=%d text_items=%d", file_path, num_pages, total_items)
    return ExtractionResult(
        file_path=file_path,
        num_pages=num_pages,
        total_text_items=total_items,
        text="\n".join(pages),
    )

