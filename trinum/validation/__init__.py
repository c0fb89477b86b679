"""
trinum Validation Module

Typed errors and argument guards shared by every layer.

Exports:
    - TrinumError: Base class of every trinum failure
    - DomainError: NaN / infinite / negative input
    - RangeError: Value exceeds a width's safe maximum
    - SourceTooLargeError: Indexer source exceeds the safe maximum
    - IndexOutOfRangeError: Indexer access outside [0, count)
    - ShapeMismatchError: Paired sequences of unequal length
    - InsufficientDataError: Too few entries for a statistic
"""

from .errors import (
    TrinumError,
    DomainError,
    RangeError,
    SourceTooLargeError,
    IndexOutOfRangeError,
    ShapeMismatchError,
    InsufficientDataError,
)

from .checks import (
    require_integer,
    require_non_negative,
    require_finite_non_negative,
    require_at_most,
)

__all__ = [
    # Errors
    'TrinumError',
    'DomainError',
    'RangeError',
    'SourceTooLargeError',
    'IndexOutOfRangeError',
    'ShapeMismatchError',
    'InsufficientDataError',
    # Guards
    'require_integer',
    'require_non_negative',
    'require_finite_non_negative',
    'require_at_most',
]
