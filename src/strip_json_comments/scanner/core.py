"""Single-pass state-machine scanner for JSON with comments.

Walks the source once, left to right, blanking or deleting ``//`` and
``/* */`` comments and optionally dropping trailing commas. String literals
are copied verbatim, so comment-like text inside them is never touched.

Runs of characters that mean nothing in the current state are found with
compiled character-class searches and copied as slices. The per-state
handlers only run at decision points (quotes, backslashes, slashes, commas,
newlines, comment closers).

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from strip_json_comments.scanner.modes import (
    BACKSLASH,
    BLOCK_COMMENT_CLOSE,
    BLOCK_COMMENT_OPEN,
    CLOSING_BRACKETS,
    COMMA,
    DEFAULT_STOPS,
    DEFAULT_STOPS_WITH_COMMA,
    LINE_BREAKS,
    LINE_COMMENT_OPEN,
    NEWLINE,
    NOT_JSON_WHITESPACE,
    QUOTE,
    SLASH,
    STRING_STOPS,
    ScanState,
)
from strip_json_comments.stringbuilder import StringBuilder
from strip_json_comments.utils.logger import get_logger

logger = get_logger(__name__)


class Scanner:
    """Comment-stripping state machine with O(n) guaranteed performance.

    Every handler either consumes at least one character or switches
    state after consuming one, so scanning always terminates, including
    on unterminated strings and comments.

    Usage:
            >>> Scanner('{"a":1 // note\\n}').scan()
            '{"a":1        \\n}'
            >>> Scanner('[1, 2,]', whitespace=False, trailing_commas=True).scan()
            '[1, 2]'

    Thread Safety:
        Scanner instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_pos",
        "_state",
        "_whitespace",
        "_trailing_commas",
        "_default_stops",
        "_result",
        "_pending",  # Text held behind an unresolved comma, or None
        "_out",  # Where emitted text goes: _result or _pending
        "_comments_removed",
        "_trailing_commas_removed",
    )

    def __init__(
        self,
        source: str,
        *,
        whitespace: bool = True,
        trailing_commas: bool = False,
    ) -> None:
        """Initialize scanner with source text.

        Args:
            source: JSON-like text, possibly with comments
            whitespace: Blank removed text instead of deleting it
            trailing_commas: Drop commas that directly precede ``}`` or ``]``
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._state = ScanState.DEFAULT
        self._whitespace = whitespace
        self._trailing_commas = trailing_commas
        self._default_stops = DEFAULT_STOPS_WITH_COMMA if trailing_commas else DEFAULT_STOPS

        self._result = StringBuilder()
        self._pending: StringBuilder | None = None
        self._out = self._result

        self._comments_removed = 0
        self._trailing_commas_removed = 0

    @property
    def state(self) -> ScanState:
        """Current scan state."""
        return self._state

    @property
    def comments_removed(self) -> int:
        """Number of comments blanked or deleted so far."""
        return self._comments_removed

    @property
    def trailing_commas_removed(self) -> int:
        """Number of trailing commas dropped so far."""
        return self._trailing_commas_removed

    def scan(self) -> str:
        """Scan the whole source and return the stripped text.

        Complexity: O(n) where n = len(source)
        """
        source = self._source
        if SLASH not in source and not (self._trailing_commas and COMMA in source):
            # Nothing can change: no comment opener and no comma to drop
            self._pos = self._source_len
            return source

        source_len = self._source_len
        while self._pos < source_len:
            self._dispatch_state()

        self._finish()
        return self._result.build()

    def _dispatch_state(self) -> None:
        """Dispatch to the handler for the current state."""
        if self._state == ScanState.DEFAULT:
            self._scan_default()
        elif self._state == ScanState.INSIDE_STRING:
            self._scan_string()
        elif self._state == ScanState.INSIDE_LINE_COMMENT:
            self._scan_line_comment()
        elif self._state == ScanState.INSIDE_BLOCK_COMMENT:
            self._scan_block_comment()

    # =========================================================================
    # State handlers
    # =========================================================================

    def _scan_default(self) -> None:
        """Copy ordinary text up to the next quote, slash or comma."""
        source = self._source
        pos = self._pos

        if self._pending is not None:
            gap = NOT_JSON_WHITESPACE.search(source, pos)
            if gap is None:
                self._out.append(source[pos:])
                self._pos = self._source_len
                return
            stop = gap.start()
            self._out.append(source[pos:stop])
            self._pos = pos = stop
            # A comment after the comma keeps it pending; its output is held too
            if not source.startswith((LINE_COMMENT_OPEN, BLOCK_COMMENT_OPEN), stop):
                self._resolve_pending(trailing=source[stop] in CLOSING_BRACKETS)

        match = self._default_stops.search(source, pos)
        if match is None:
            self._out.append(source[pos:])
            self._pos = self._source_len
            return

        stop = match.start()
        self._out.append(source[pos:stop])
        char = source[stop]

        if char == QUOTE:
            self._out.append(QUOTE)
            self._pos = stop + 1
            self._state = ScanState.INSIDE_STRING
        elif char == COMMA:
            self._pos = stop + 1
            self._pending = StringBuilder()
            self._out = self._pending
        elif source.startswith(LINE_COMMENT_OPEN, stop):
            self._open_comment(stop, ScanState.INSIDE_LINE_COMMENT)
        elif source.startswith(BLOCK_COMMENT_OPEN, stop):
            self._open_comment(stop, ScanState.INSIDE_BLOCK_COMMENT)
        else:
            # Lone slash
            self._out.append(SLASH)
            self._pos = stop + 1

    def _scan_string(self) -> None:
        """Copy string content verbatim up to the closing quote."""
        source = self._source
        pos = self._pos
        match = STRING_STOPS.search(source, pos)
        if match is None:
            self._out.append(source[pos:])
            self._pos = self._source_len
            return

        stop = match.start()
        if source[stop] == BACKSLASH:
            # The backslash and the character it escapes go out together
            end = min(stop + 2, self._source_len)
            self._out.append(source[pos:end])
            self._pos = end
        else:
            self._out.append(source[pos : stop + 1])
            self._pos = stop + 1
            self._state = ScanState.DEFAULT

    def _scan_line_comment(self) -> None:
        """Blank the rest of the line; the newline itself is kept."""
        source = self._source
        pos = self._pos
        end = source.find(NEWLINE, pos)
        if end == -1:
            self._out.append(self._blank(source[pos:]))
            self._pos = self._source_len
            return

        self._out.append(self._blank_keeping_lines(source[pos : end + 1]))
        self._pos = end + 1
        self._state = ScanState.DEFAULT

    def _scan_block_comment(self) -> None:
        """Blank up to and including the closing ``*/``."""
        source = self._source
        pos = self._pos
        end = source.find(BLOCK_COMMENT_CLOSE, pos)
        if end == -1:
            self._out.append(self._blank_keeping_lines(source[pos:]))
            self._pos = self._source_len
            return

        self._out.append(self._blank_keeping_lines(source[pos:end]))
        self._out.append(self._blank(BLOCK_COMMENT_CLOSE))
        self._pos = end + 2
        self._state = ScanState.DEFAULT

    # =========================================================================
    # Helpers
    # =========================================================================

    def _open_comment(self, start: int, state: ScanState) -> None:
        """Consume a two-character comment opener and enter ``state``."""
        self._out.append(self._blank(self._source[start : start + 2]))
        self._pos = start + 2
        self._state = state
        self._comments_removed += 1

    def _resolve_pending(self, *, trailing: bool) -> None:
        """Settle the pending comma and release the text held behind it."""
        pending = self._pending
        if pending is None:
            return
        self._pending = None
        self._out = self._result
        if trailing:
            self._result.append(self._blank(COMMA))
            self._trailing_commas_removed += 1
        else:
            self._result.append(COMMA)
        self._result.absorb(pending)

    def _blank(self, text: str) -> str:
        """Removed text with everything but JSON whitespace turned to spaces (or nothing)."""
        if self._whitespace:
            return NOT_JSON_WHITESPACE.sub(" ", text)
        return ""

    def _blank_keeping_lines(self, text: str) -> str:
        """Like _blank, but line breaks (LF or CRLF) survive even when deleting."""
        if self._whitespace:
            return NOT_JSON_WHITESPACE.sub(" ", text)
        return "".join(LINE_BREAKS.findall(text))

    def _finish(self) -> None:
        """Flush end-of-input state."""
        # A comma followed only by whitespace/comments is not trailing
        self._resolve_pending(trailing=False)

        if self._state == ScanState.INSIDE_STRING:
            logger.debug("Input ended inside a string literal (%d chars)", self._source_len)
        elif self._state == ScanState.INSIDE_BLOCK_COMMENT:
            logger.debug("Input ended inside a block comment (%d chars)", self._source_len)
