"""
Error Taxonomy

Every failure raised by trinum is a TrinumError. Each concrete error also
derives from the builtin exception a caller would naturally catch, so
``except ValueError`` / ``except IndexError`` keep working.

PRINCIPLE: "Fail at the offending call, never clamp"

Usage:
    from trinum.validation import DomainError, RangeError

    try:
        forward(n, IntWidth.INT16)
    except RangeError as e:
        print(f"{e.argument}={e.value} is out of range")
"""

from typing import Any, Optional


class TrinumError(Exception):
    """Base class for all trinum errors."""

    def __init__(
        self,
        message: str,
        argument: Optional[str] = None,
        value: Any = None,
    ):
        self.argument = argument
        self.value = value
        self.message = message

        if argument is not None:
            message = f"{argument}: {message} (got {value!r})"

        super().__init__(message)


class DomainError(TrinumError, ValueError):
    """Input is NaN, infinite or negative where a non-negative finite value is required."""


class RangeError(TrinumError, OverflowError):
    """Input or result exceeds the safe maximum for the target integer width."""


class SourceTooLargeError(RangeError):
    """Source collection is too large to be indexed triangularly."""

    def __init__(self, count: int, maximum: int, grown: bool = False):
        self.count = count
        self.maximum = maximum

        verb = "has grown too large" if grown else "is too large"
        super().__init__(
            f"Source collection {verb} to be indexed. {count} > {maximum} (max size)",
            argument="source",
            value=count,
        )


class IndexOutOfRangeError(TrinumError, IndexError):
    """Index is outside [0, count)."""

    def __init__(self, index: int, count: int):
        self.index = index
        self.count = count

        super().__init__(
            f"must be in [0, {count})",
            argument="index",
            value=index,
        )


class ShapeMismatchError(TrinumError, ValueError):
    """Paired sequences have different lengths."""

    def __init__(self, operation: str, source_count: Optional[int] = None,
                 target_count: Optional[int] = None):
        self.operation = operation
        self.source_count = source_count
        self.target_count = target_count

        message = f"{operation}: source and target sequences have different counts"
        if source_count is not None and target_count is not None:
            message += f" ({source_count} != {target_count})"

        super().__init__(message)


class InsufficientDataError(TrinumError, ValueError):
    """Not enough entries for the requested statistic."""

    def __init__(self, operation: str, required: int, actual: int):
        self.operation = operation
        self.required = required
        self.actual = actual

        super().__init__(
            f"{operation}: not enough entries for calculation "
            f"(need {required}, got {actual})"
        )
