"""Exception classes for strip_json_comments.

The scanner tolerates any text, however malformed as JSON. The only failure
is being handed an argument of the wrong kind, such as bytes instead of str.
"""

from __future__ import annotations


class StripJsonCommentsError(Exception):
    """Base exception for all strip_json_comments errors.
    
    Subclass this for specific error categories.
    """

    pass


class InvalidInputKindError(StripJsonCommentsError, TypeError):
    """An argument to strip() is not of an accepted kind.
    
    Also a TypeError, so code that guards the call with ``except TypeError``
    keeps working.
    """

    def __init__(self, value: object, argument: str = "text", expected: str = "str") -> None:
        """Initialize with the offending value.

        Args:
            value: The value that was passed in
            argument: Name of the argument that received it
            expected: Description of the accepted kind
        """
        self.kind = type(value).__name__
        self.argument = argument
        self.expected = expected
        super().__init__(
            f"Expected argument `{argument}` to be a `{expected}`, got `{self.kind}`"
        )
