"""StripAccumulator: opt-in profiling for comment stripping.

This module provides accumulated metrics across strip() calls:
- Total elapsed time
- Source and output length
- Comments and trailing commas removed

Zero overhead when disabled (get_strip_accumulator() returns None).

Example:
    from strip_json_comments import strip
    from strip_json_comments.profiling import profiled_strip

    with profiled_strip() as metrics:
        strip('{"a": 1 // one\\n}')

    print(metrics.summary())
    # {"total_ms": 0.1, "strip_calls": 1, "source_length": 16, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class StripAccumulator:
    """Accumulated metrics across strip() calls.

    Attributes:
        start_time: Profiling start timestamp.
        strip_calls: Number of strip() calls recorded.
        source_length: Total characters of input.
        output_length: Total characters of output.
        comments_removed: Total comments blanked or deleted.
        trailing_commas_removed: Total trailing commas dropped.

    """

    start_time: float = field(default_factory=perf_counter)
    strip_calls: int = 0
    source_length: int = 0
    output_length: int = 0
    comments_removed: int = 0
    trailing_commas_removed: int = 0

    def record_strip(
        self,
        source_length: int,
        output_length: int,
        comments_removed: int,
        trailing_commas_removed: int,
    ) -> None:
        """Record one strip() call."""
        self.strip_calls += 1
        self.source_length += source_length
        self.output_length += output_length
        self.comments_removed += comments_removed
        self.trailing_commas_removed += trailing_commas_removed

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of strip metrics.

        Returns:
            Dict with total_ms and every counter.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "strip_calls": self.strip_calls,
            "source_length": self.source_length,
            "output_length": self.output_length,
            "comments_removed": self.comments_removed,
            "trailing_commas_removed": self.trailing_commas_removed,
        }


_accumulator: ContextVar[StripAccumulator | None] = ContextVar(
    "strip_accumulator",
    default=None,
)


def get_strip_accumulator() -> StripAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_strip() -> Iterator[StripAccumulator]:
    """Context manager for profiled stripping.

    Creates a StripAccumulator and makes it available via
    get_strip_accumulator() for the duration of the with block.

    Yields:
        StripAccumulator that will be populated during strip() calls.

    """
    acc = StripAccumulator()
    token: Token[StripAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
