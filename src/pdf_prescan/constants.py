# src/pdf_prescan/constants.py
from __future__ import annotations

import re
from typing import Final

from .types import Category

# Bump when the JSON report structure or field semantics change
SCHEMA_VERSION: Final = "1.0.0"

SUPPORTED_SUFFIX: Final = ".pdf"

# Report labels
TEXT_LAYER_YES: Final = "YES (text-based PDF)"
TEXT_LAYER_NO: Final = "NO (likely scanned/image-only)"
NO_TEXT_MESSAGE: Final = (
    "This PDF appears to have no extractable text. v1 does not support scanned PDFs."
)

_FLAGS: Final = re.IGNORECASE | re.UNICODE

# ---------------------------------------------------------------------------
# Built-in sensitive-term catalogue.
# Declaration order is the report order. Every pattern is case-insensitive;
# a category's count is the sum over its patterns.
# ---------------------------------------------------------------------------

# "Mr. Smith", "Dr Jones", "prof. o'neil"
NAME_HONORIFIC_RX: Final[re.Pattern[str]] = re.compile(
    r"\b(?:mr|mrs|ms|miss|dr|prof)\.?\s+[a-z][a-z'\-]+", _FLAGS
)
# "Name: ..." / "Full name:" form labels
NAME_LABEL_RX: Final[re.Pattern[str]] = re.compile(r"\bname\s*:", _FLAGS)

# "123-45-6789"
SSN_RX: Final[re.Pattern[str]] = re.compile(r"(?<!\d)\d{3}-\d{2}-\d{4}(?!\d)", _FLAGS)

# "jane.doe+x@example.co.uk"
EMAIL_RX: Final[re.Pattern[str]] = re.compile(
    r"\b[a-z0-9._%+\-]+@[a-z0-9.\-]+\.[a-z]{2,}\b", _FLAGS
)

# "(555) 123-4567", "+1 555.123.4567", "555 123 4567"
PHONE_RX: Final[re.Pattern[str]] = re.compile(
    r"(?<![\d\-])(?:\+?1[\s.\-]?)?(?:\(\d{3}\)|\d{3})[\s.\-]?\d{3}[\s.\-]\d{4}(?![\d\-])",
    _FLAGS,
)

# "4111 1111 1111 1111", "4111-1111-1111-1111"
CARD_RX: Final[re.Pattern[str]] = re.compile(r"(?<!\d)(?:\d{4}[ \-]?){3}\d{4}(?!\d)", _FLAGS)

# "1/2/2024", "01.02.24", "1-2-2024"
DATE_DMY_RX: Final[re.Pattern[str]] = re.compile(
    r"(?<![\d\-])\d{1,2}[/.\-]\d{1,2}[/.\-]\d{2,4}(?![\d\-])", _FLAGS
)
# "2024-01-31"
DATE_ISO_RX: Final[re.Pattern[str]] = re.compile(r"(?<!\d)\d{4}-\d{2}-\d{2}(?!\d)", _FLAGS)

# bare digit runs such as bank or account numbers
ACCOUNT_RX: Final[re.Pattern[str]] = re.compile(r"(?<!\d)\d{9,18}(?!\d)", _FLAGS)

BUILTIN_CATEGORIES: Final[tuple[Category, ...]] = (
    Category(
        "Names",
        (NAME_HONORIFIC_RX, NAME_LABEL_RX),
        "Honorific followed by a word (Mr./Mrs./Ms./Miss/Dr./Prof.) and 'name:' labels",
    ),
    Category("SSN-like", (SSN_RX,), "US social security number shape ddd-dd-dddd"),
    Category("Email-like", (EMAIL_RX,), "local-part@domain.tld"),
    Category(
        "Phone-like",
        (PHONE_RX,),
        "10-digit phone numbers with optional +1, parentheses and separators",
    ),
    Category("Card-number-like", (CARD_RX,), "16 digits in four groups of four"),
    Category("Date-like", (DATE_DMY_RX, DATE_ISO_RX), "d/m/yyyy style dates and ISO yyyy-mm-dd"),
    Category("Account-number-like", (ACCOUNT_RX,), "standalone runs of 9-18 digits"),
)
