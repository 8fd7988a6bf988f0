"""State-machine scanner for stripping comments from JSON text.

Architecture:
scanner/
├── __init__.py          # Re-exports Scanner, ScanState
├── core.py              # Scanner class (state handlers + pending comma slot)
└── modes.py             # ScanState enum, delimiters, compiled stop searches

Usage:
    >>> from strip_json_comments.scanner import Scanner
    >>> Scanner('{"a": /* one */ 1}').scan()
    '{"a":           1}'

"""

from strip_json_comments.scanner.core import Scanner
from strip_json_comments.scanner.modes import ScanState

__all__ = ["ScanState", "Scanner"]
