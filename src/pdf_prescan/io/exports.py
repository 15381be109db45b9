# src/pdf_prescan/io/exports.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..constants import NO_TEXT_MESSAGE, SCHEMA_VERSION, TEXT_LAYER_NO, TEXT_LAYER_YES
from ..types import ScanOutcome


def render_report(outcome: ScanOutcome) -> list[str]:
    """Human-readable report lines for one scan."""
    ex = outcome.extraction
    lines = [
        "=== PDF Scan Report ===",
        f"File: {ex.file_path}",
        f"Pages: {ex.num_pages}",
        f"Text items: {ex.total_text_items}",
        f"Text layer: {TEXT_LAYER_YES if outcome.has_text_layer else TEXT_LAYER_NO}",
        "",
    ]
    if outcome.counts is None:
        lines.append(NO_TEXT_MESSAGE)
        return lines

    lines.append("Potential redactions (counts):")
    lines.extend(f"- {name}: {n}" for name, n in outcome.counts.items())
    return lines


def report_payload(outcome: ScanOutcome) -> dict[str, Any]:
    ex = outcome.extraction
    return {
        "schema_version": SCHEMA_VERSION,
        "file": ex.file_path,
        "pages": ex.num_pages,
        "text_items": ex.total_text_items,
        "has_text_layer": outcome.has_text_layer,
        "counts": dict(outcome.counts) if outcome.counts is not None else None,
    }


def write_json(payload: Any, out_path: Path) -> None:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)
        f.write("\n")
