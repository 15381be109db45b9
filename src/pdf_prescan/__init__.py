"""
pdf_prescan package.
"""

from .core import scan_pdf, scan_text
from .io.pdf import extract_pdf_text
from .scanning.baseline import scan_baseline
from .scanning.text_layer import has_text_layer

__all__ = ["extract_pdf_text", "has_text_layer", "scan_baseline", "scan_pdf", "scan_text"]
__version__ = "0.1.0"
