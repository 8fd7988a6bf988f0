"""Option resolution for strip().

Turns whatever the caller passed (nothing, a StripOptions, or a plain mapping
such as a decoded config file) into the two booleans the scanner consumes.

Defaults for calls that pass no options live in a ContextVar (PEP 567), so
a framework can set them once per thread or task without affecting others.

Usage:
    # Explicit options
    strip(text, StripOptions(trailing_commas=True))

    # Mapping with the camelCase keys used by the JavaScript library
    strip(text, {"whitespace": False, "trailingCommas": True})

    # Scoped defaults
    with default_options_context(StripOptions(whitespace=False)):
        strip(text)  # comments deleted, not blanked

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from typing import Any

from strip_json_comments.errors import InvalidInputKindError

# Mapping keys accepted for each field. Both spellings of trailing commas are
# recognized; anything else in a mapping is ignored.
_KEY_ALIASES: dict[str, str] = {
    "whitespace": "whitespace",
    "trailingCommas": "trailing_commas",
    "trailing_commas": "trailing_commas",
}


@dataclass(frozen=True, slots=True)
class StripOptions:
    """Immutable strip configuration.

    Attributes:
        whitespace: Replace removed comments (and trailing commas) with
            equal-length whitespace so line and column positions survive.
            When False they are deleted outright.
        trailing_commas: Also remove a comma that is the last token before
            a closing ``}`` or ``]``.

    """

    whitespace: bool = True
    trailing_commas: bool = False

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "StripOptions":
        """Create StripOptions from a mapping.

        Recognizes ``whitespace``, ``trailingCommas`` and ``trailing_commas``.
        Unknown keys are silently ignored and ``None`` values fall back to the
        field default.

        Args:
            config_dict: Mapping with option values.

        Returns:
            New StripOptions instance.

        Example:
            >>> StripOptions.from_dict({"trailingCommas": True, "extra": 1})
            StripOptions(whitespace=True, trailing_commas=True)

        """
        return cls(**_recognized_values(config_dict))


def _recognized_values(config_dict: Mapping[str, Any]) -> dict[str, bool]:
    """Map recognized, non-None keys to field names with bool values."""
    values: dict[str, bool] = {}
    for key, value in config_dict.items():
        field_name = _KEY_ALIASES.get(key)
        if field_name is None or value is None:
            continue
        values[field_name] = bool(value)
    return values


# Module-level default options (reused, never recreated)
_DEFAULT_OPTIONS: StripOptions = StripOptions()

_default_options: ContextVar[StripOptions] = ContextVar(
    "strip_default_options",
    default=_DEFAULT_OPTIONS,
)


def get_default_options() -> StripOptions:
    """Get the options used when strip() is called without any."""
    return _default_options.get()


def set_default_options(options: StripOptions) -> None:
    """Set default options for the current context.

    Args:
        options: StripOptions to use for calls that pass none.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _default_options.set(options)


def reset_default_options() -> None:
    """Reset the current context to the built-in defaults."""
    _default_options.set(_DEFAULT_OPTIONS)


@contextmanager
def default_options_context(options: StripOptions) -> Iterator[None]:
    """Context manager for temporary default options.

    Args:
        options: StripOptions to use as defaults within the block.

    Example:
        >>> with default_options_context(StripOptions(trailing_commas=True)):
        ...     strip('[1,]')
        '[1 ]'

    Thread Safety:
        Only affects the current thread's context. Restores the previous
        defaults even if an exception is raised.

    """
    previous = _default_options.get()
    _default_options.set(options)
    try:
        yield
    finally:
        _default_options.set(previous)


def resolve_options(
    options: StripOptions | Mapping[str, Any] | None = None,
    *,
    whitespace: bool | None = None,
    trailing_commas: bool | None = None,
) -> StripOptions:
    """Resolve caller-supplied options into a StripOptions.

    Args:
        options: None (use context defaults), a StripOptions, or a mapping.
        whitespace: Keyword override, wins over ``options`` when not None.
        trailing_commas: Keyword override, wins over ``options`` when not None.

    Returns:
        The effective StripOptions for one strip() call.

    """
    if options is None:
        resolved = get_default_options()
    elif isinstance(options, StripOptions):
        resolved = options
    elif isinstance(options, Mapping):
        # Keys missing from the mapping fall back to the context defaults
        resolved = replace(get_default_options(), **_recognized_values(options))
    else:
        raise InvalidInputKindError(options, argument="options", expected="StripOptions or mapping")

    if whitespace is not None or trailing_commas is not None:
        resolved = replace(
            resolved,
            whitespace=resolved.whitespace if whitespace is None else bool(whitespace),
            trailing_commas=(
                resolved.trailing_commas if trailing_commas is None else bool(trailing_commas)
            ),
        )
    return resolved


__all__ = [
    "StripOptions",
    "default_options_context",
    "get_default_options",
    "reset_default_options",
    "resolve_options",
    "set_default_options",
]
