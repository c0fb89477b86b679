"""
Typed numeric operations.

An Arithmetic is bound to one numeric type and always answers in that
type, whatever the type of the second operand:

    INTEGER.add(3, 0.9)                      -> 3      (truncated to int)
    REAL.divide(7, 2)                        -> 3.5
    Arithmetic.for_width('int16').multiply(300, 300)   -> RangeError

The operand type is chosen by the caller up front; nothing is resolved by
inspecting values at call time.
"""

import math
import numbers
from dataclasses import dataclass
from typing import Any, Union

import numpy as np

from trinum.primitives.triangular import IntWidth
from trinum.validation import DomainError, RangeError, require_integer


@dataclass(frozen=True)
class Arithmetic:
    """add / subtract / multiply / divide / power over a single numeric type."""

    kind: type

    @classmethod
    def for_width(cls, width: Union[IntWidth, str]) -> 'Arithmetic':
        """Arithmetic over the numpy scalar type of an integer width."""
        return cls(IntWidth.parse(width).dtype.type)

    @property
    def integral(self) -> bool:
        return issubclass(self.kind, (numbers.Integral, np.integer))

    def coerce(self, value: Any):
        """Convert value to kind, truncating toward zero for integral kinds."""
        if not self.integral:
            return self.kind(value)

        if isinstance(value, (float, np.floating)):
            if not math.isfinite(value):
                raise DomainError("Must be finite.", 'value', value)
            value = int(value)
        value = int(value)

        if issubclass(self.kind, np.integer):
            info = np.iinfo(self.kind)
            if not int(info.min) <= value <= int(info.max):
                raise RangeError(f"Not representable as {self.kind.__name__}.", 'value', value)
        return self.kind(value)

    def add(self, a, b):
        return self.coerce(self._native(a) + self._native(b))

    def subtract(self, a, b):
        return self.coerce(self._native(a) - self._native(b))

    def multiply(self, a, b):
        return self.coerce(self._native(a) * self._native(b))

    def divide(self, a, b):
        a, b = self._native(a), self._native(b)
        if self.integral and isinstance(a, int) and isinstance(b, int):
            if b == 0:
                raise ZeroDivisionError("integer division by zero")
            q = abs(a) // abs(b)
            return self.coerce(q if (a < 0) == (b < 0) else -q)
        return self.coerce(a / b)

    def power(self, a, power: int):
        """a (converted to kind) multiplied by itself power times; power 0 gives 1."""
        power = require_integer(power, 'power')
        if power < 0:
            raise DomainError("Must be at least zero.", 'power', power)
        if power == 0:
            return self.coerce(1)

        a = self.coerce(a)
        result = a
        for _ in range(power - 1):
            result = self.multiply(result, a)
        return result

    @staticmethod
    def _native(value):
        # Python scalars so numpy fixed-width types never wrap silently
        if isinstance(value, np.generic):
            return value.item()
        return value


INTEGER = Arithmetic(int)
REAL = Arithmetic(float)
