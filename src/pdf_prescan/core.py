# src/pdf_prescan/core.py
from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from .constants import SUPPORTED_SUFFIX
from .errors import InputNotFoundError, UnsupportedInputError
from .io.pdf import extract_pdf_text
from .io.terms import collect_terms
from .scanning.baseline import scan_baseline
from .scanning.text_layer import has_text_layer
from .types import NoTextLayer, ScanCounts, ScanOutcome, ScanReport

log = logging.getLogger(__name__)


def resolve_input(path: str | Path) -> Path:
    """Absolute path of a single, existing PDF file."""
    full = Path(path).expanduser().resolve()
    if not full.exists():
        raise InputNotFoundError(full)
    if not full.is_file():
        raise UnsupportedInputError(
            f"only single PDF files are supported in v1 scan (got: {full})", full
        )
    if full.suffix.lower() != SUPPORTED_SUFFIX:
        raise UnsupportedInputError(f"not a PDF: {full}", full)
    return full


def scan_text(text: str, terms: Sequence[str] = ()) -> ScanCounts:
    """Baseline counts for already-extracted text."""
    return scan_baseline(text, list(terms))


def scan_pdf(
    pdf_path: str | Path,
    terms: Sequence[str] | None = None,
    terms_file: Path | None = None,
) -> ScanOutcome:
    """
    Validate, extract, and scan one PDF.

    Returns ScanReport when a text layer is present, NoTextLayer otherwise.
    Raises a PrescanError subclass when the input is unusable, the terms file
    cannot be read, or extraction fails; nothing is counted in those cases.
    """
    full = resolve_input(pdf_path)
    custom_terms = collect_terms(terms, terms_file)
    log.debug("Scanning %s with %d custom term(s)", full, len(custom_terms))

    extraction = extract_pdf_text(full)
    if not has_text_layer(extraction):
        log.debug("No usable text layer in %s", full)
        return NoTextLayer(extraction)

    return ScanReport(extraction, scan_baseline(extraction.text, custom_terms))
