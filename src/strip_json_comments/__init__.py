"""
strip_json_comments: Strip comments from JSON

Removes ``//`` and ``/* */`` comments from JSON-like text so that
``json.loads`` can read it. By default each comment is replaced with
whitespace of the same length, so error positions reported by a JSON
parser still point at the right line and column. Comment-like text inside
string literals is left alone.

Quick Start:
    >>> import json
    >>> from strip_json_comments import strip
    >>> json.loads(strip('{//rainbows\\n"unicorn":"cake"}'))
    {'unicorn': 'cake'}

    >>> # Delete instead of blanking, and drop trailing commas
    >>> strip('[1, 2, /* three */]', {"whitespace": False, "trailingCommas": True})
    '[1, 2 ]'

This is not a JSON parser: malformed JSON goes in, equally malformed JSON
comes out, minus the comments.
"""

from collections.abc import Mapping
from typing import Any

from strip_json_comments.errors import InvalidInputKindError, StripJsonCommentsError
from strip_json_comments.options import (
    StripOptions,
    default_options_context,
    get_default_options,
    reset_default_options,
    resolve_options,
    set_default_options,
)
from strip_json_comments.profiling import (
    StripAccumulator,
    get_strip_accumulator,
    profiled_strip,
)
from strip_json_comments.scanner import Scanner, ScanState

__version__ = "0.1.0"


def strip(
    text: str,
    options: StripOptions | Mapping[str, Any] | None = None,
    *,
    whitespace: bool | None = None,
    trailing_commas: bool | None = None,
) -> str:
    """Strip comments (and optionally trailing commas) from JSON text.

    Args:
        text: JSON-like source text
        options: StripOptions, a mapping with ``whitespace`` and
            ``trailingCommas`` keys (unknown keys ignored), or None for the
            current context defaults
        whitespace: Override for ``options.whitespace``
        trailing_commas: Override for ``options.trailing_commas``

    Returns:
        The text with comments blanked or removed

    Raises:
        InvalidInputKindError: If ``text`` is not a str, or ``options`` is
            neither a StripOptions nor a mapping. Nothing else raises.

    Example:
        >>> strip('{"a":"b"/*comment*/}', whitespace=False)
        '{"a":"b"}'
        >>> strip('{"x":true,}', trailing_commas=True)
        '{"x":true }'
    """
    if not isinstance(text, str):
        raise InvalidInputKindError(text)

    resolved = resolve_options(
        options,
        whitespace=whitespace,
        trailing_commas=trailing_commas,
    )
    scanner = Scanner(
        text,
        whitespace=resolved.whitespace,
        trailing_commas=resolved.trailing_commas,
    )
    result = scanner.scan()

    acc = get_strip_accumulator()
    if acc is not None:
        acc.record_strip(
            source_length=len(text),
            output_length=len(result),
            comments_removed=scanner.comments_removed,
            trailing_commas_removed=scanner.trailing_commas_removed,
        )

    return result


# Name used by the JavaScript library this mirrors
strip_json_comments = strip


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "strip",
    "strip_json_comments",
    # Options
    "StripOptions",
    "resolve_options",
    "get_default_options",
    "set_default_options",
    "reset_default_options",
    "default_options_context",
    # Scanner
    "Scanner",
    "ScanState",
    # Errors
    "StripJsonCommentsError",
    "InvalidInputKindError",
    # Profiling
    "StripAccumulator",
    "get_strip_accumulator",
    "profiled_strip",
]
