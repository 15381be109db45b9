from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Union

from .errors import EXIT_INVALID_INPUT, EXIT_OK

# Ordered mapping category/term name -> occurrence count
ScanCounts = Dict[str, int]


@dataclass(frozen=True, slots=True)
class ExtractionResult:
    """What the text-layer extractor produced for one PDF."""
    file_path: str
    num_pages: int
    total_text_items: int
    text: str


@dataclass(frozen=True, slots=True)
class Category:
    """A named group of case-insensitive match patterns."""
    name: str
    patterns: Tuple[re.Pattern[str], ...]
    description: str = ""


@dataclass(frozen=True, slots=True)
class ScanReport:
    """Text layer present; counts may all be zero."""
    extraction: ExtractionResult
    counts: ScanCounts = field(default_factory=dict)

    has_text_layer = True

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    @property
    def exit_code(self) -> int:
        return EXIT_OK


@dataclass(frozen=True, slots=True)
class NoTextLayer:
    """Extraction succeeded but nothing usable came out of it."""
    extraction: ExtractionResult
    counts: Optional[ScanCounts] = None

    has_text_layer = False

    @property
    def exit_code(self) -> int:
        return EXIT_INVALID_INPUT


ScanOutcome = Union[ScanReport, NoTextLayer]
