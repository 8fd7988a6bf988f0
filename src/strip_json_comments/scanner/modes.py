"""Scanner states and delimiter constants.

This module defines the finite state machine states for the scanner and
the compiled searches each state uses to jump to its next decision point.
"""

from __future__ import annotations

import re
from enum import Enum, auto


class ScanState(Enum):
    """Scanner states.
    
    Exactly one state is active at any position:
    - DEFAULT: Ordinary JSON text, outside strings and comments
    - INSIDE_STRING: Between an opening and closing double quote
    - INSIDE_LINE_COMMENT: After ``//``, up to the next newline
    - INSIDE_BLOCK_COMMENT: After ``/*``, up to the next ``*/``
        
    """

    DEFAULT = auto()
    INSIDE_STRING = auto()
    INSIDE_LINE_COMMENT = auto()
    INSIDE_BLOCK_COMMENT = auto()


QUOTE = '"'
BACKSLASH = "\\"
SLASH = "/"
COMMA = ","
NEWLINE = "\n"
LINE_COMMENT_OPEN = "//"
BLOCK_COMMENT_OPEN = "/*"
BLOCK_COMMENT_CLOSE = "*/"

# Characters that close a structure and make a pending comma "trailing"
CLOSING_BRACKETS = frozenset("}]")

# The only whitespace JSON allows; it may sit between a comma and the
# bracket it trails, and it survives blanking unchanged
JSON_WHITESPACE = " \t\r\n"

# Next interesting character in DEFAULT state
DEFAULT_STOPS = re.compile(r'["/]')
DEFAULT_STOPS_WITH_COMMA = re.compile(r'["/,]')

# Next interesting character in INSIDE_STRING state
STRING_STOPS = re.compile(r'["\\]')

# Anything else: the first character that resolves a pending comma, and
# every character that blanking turns into a single space
NOT_JSON_WHITESPACE = re.compile(f"[^{re.escape(JSON_WHITESPACE)}]")

# Line breaks kept when comment text is deleted outright
LINE_BREAKS = re.compile(r"\r?\n")
