from __future__ import annotations

from pathlib import Path

import pytest
from pdf_prescan.core import scan_pdf
from pdf_prescan.errors import ExtractionError
from pdf_prescan.io.pdf import extract_pdf_text
from pdf_prescan.types import NoTextLayer, ScanReport


def test_extract_text_layer(make_pdf) -> None:
    pdf = make_pdf(["Contact: jane@example.com, SSN 123-45-6789", "Alice met Bob"])
    result = extract_pdf_text(pdf)

    assert result.file_path == str(pdf)
    assert result.num_pages == 1
    assert result.total_text_items >= 2
    assert "jane@example.com" in result.text
    assert "Alice met Bob" in result.text


def test_scan_text_based_pdf(make_pdf) -> None:
    pdf = make_pdf(["Contact: jane@example.com, SSN 123-45-6789", "Alice met Bob"])
    outcome = scan_pdf(pdf, terms=["alice", "BOB"])

    assert isinstance(outcome, ScanReport)
    assert outcome.counts["Email-like"] >= 1
    assert outcome.counts["SSN-like"] >= 1
    assert outcome.counts["alice"] == 1
    assert outcome.counts["BOB"] == 1


def test_scan_pdf_without_text(make_pdf) -> None:
    pdf = make_pdf([], name="scan.pdf")
    result = extract_pdf_text(pdf)
    assert result.num_pages == 1
    assert result.total_text_items == 0
    assert result.text.strip() == ""

    assert isinstance(scan_pdf(pdf), NoTextLayer)


def test_corrupt_pdf_fails_extraction(tmp_path: Path) -> None:
    bad = tmp_path / "broken.pdf"
    bad.write_bytes(b"this is not a pdf at all")
    with pytest.raises(ExtractionError) as exc:
        extract_pdf_text(bad)
    assert exc.value.__cause__ is not None
