"""Language values: strings, symbols, big integers, numbers and the tagged value type."""

from __future__ import annotations

import enum
import math
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, ClassVar, Optional, Union


class ThrowCompletion(Exception):
    """An abrupt completion carrying a thrown error message."""


@dataclass(frozen=True)
class JSString:
    """The String type."""

    value: str

    def utf16_len(self) -> int:
        """Return the number of characters in the string."""
        return len(self.value)

    def is_empty(self) -> bool:
        return not self.value

    @classmethod
    def from_value(cls, value: "JSValue") -> "JSString":
        """Extract the string held by a String value."""
        if value.kind is ValueKind.STRING:
            return value.payload
        raise ThrowCompletion("Expected a String value for conversion to a string")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class JSSymbol:
    """The Symbol type."""

    description: Optional[str] = None

    @classmethod
    def from_value(cls, value: "JSValue") -> "JSSymbol":
        """Extract the symbol held by a Symbol value."""
        if value.kind is ValueKind.SYMBOL:
            return value.payload
        raise ThrowCompletion("Expected a Symbol value for conversion to a symbol")


@dataclass(frozen=True)
class JSBigInt:
    """The BigInt type."""

    def is_zero(self) -> bool:
        return False

    @classmethod
    def from_value(cls, value: "JSValue") -> "JSBigInt":
        """Extract the big integer held by a BigInt value."""
        if value.kind is ValueKind.BIG_INT:
            return value.payload
        raise ThrowCompletion("Expected a BigInt value for conversion to a big integer")


_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_UINT32_MAX = 2**32 - 1

_FLOAT_SYNTAX = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)",
    re.IGNORECASE,
)


def _as_i32(x: float) -> int:
    """Saturating float-to-int32 cast; NaN becomes 0."""
    if math.isnan(x):
        return 0
    if x >= _INT32_MAX:
        return _INT32_MAX
    if x <= _INT32_MIN:
        return _INT32_MIN
    return int(x)


def _as_u32(x: float) -> int:
    """Saturating float-to-uint32 cast; NaN becomes 0."""
    if math.isnan(x):
        return 0
    if x >= _UINT32_MAX:
        return _UINT32_MAX
    if x <= 0:
        return 0
    return int(x)


def _wrap_i32(n: int) -> int:
    n &= 0xFFFFFFFF
    return n - 0x100000000 if n & 0x80000000 else n


def _is_odd_integer(y: float) -> bool:
    return math.isfinite(y) and y == math.floor(y) and math.fmod(y, 2.0) != 0.0


def _pow(base: float, exponent: float) -> float:
    """IEEE 754 power without raising on domain errors or overflow."""
    if base == 0.0 and exponent < 0:
        if _is_odd_integer(exponent):
            return math.copysign(math.inf, base)
        return math.inf
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        return math.nan


def _divide(x: float, y: float) -> float:
    if y == 0.0:
        if math.isnan(x) or x == 0.0:
            return math.nan
        return math.copysign(math.inf, x) * math.copysign(1.0, y)
    return x / y


def _format_float(x: float) -> str:
    """Shortest round-trip decimal form, written positionally without an exponent."""
    return format(Decimal(repr(x)).normalize(), "f")


@dataclass(frozen=True, eq=False)
class JSNumber:
    """The Number type: an IEEE 754 double."""

    value: float = 0.0

    MAX_SAFE_INTEGER: ClassVar[int] = 2**53 - 1
    MAX_VALUE: ClassVar[float] = 1.7976931348623157e308
    MIN_SAFE_INTEGER: ClassVar[int] = -(2**53 - 1)
    MIN_VALUE: ClassVar[float] = -1.7976931348623157e308

    NAN: ClassVar["JSNumber"]
    ZERO: ClassVar["JSNumber"]
    POS_ZERO: ClassVar["JSNumber"]
    NEG_ZERO: ClassVar["JSNumber"]

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    def __repr__(self) -> str:
        return f"JSNumber({self.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JSNumber):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __lt__(self, other: "JSNumber") -> bool:
        return self.value < other.value

    def __le__(self, other: "JSNumber") -> bool:
        return self.value <= other.value

    def __gt__(self, other: "JSNumber") -> bool:
        return self.value > other.value

    def __ge__(self, other: "JSNumber") -> bool:
        return self.value >= other.value

    def is_zero(self) -> bool:
        return self.value == 0.0

    def _is_pos_zero(self) -> bool:
        return self.value == 0.0 and math.copysign(1.0, self.value) > 0

    def _is_neg_zero(self) -> bool:
        return self.value == 0.0 and math.copysign(1.0, self.value) < 0

    def is_nan(self) -> bool:
        return math.isnan(self.value)

    def is_finite(self) -> bool:
        return math.isfinite(self.value)

    def _is_infinite(self) -> bool:
        return math.isinf(self.value)

    def is_pos_infinite(self) -> bool:
        return math.isinf(self.value) and self.value > 0

    def is_neg_infinite(self) -> bool:
        return math.isinf(self.value) and self.value < 0

    def unary_minus(self) -> "JSNumber":
        if self.is_nan():
            return JSNumber.NAN
        return JSNumber(-self.value)

    def bitwise_not(self) -> "JSNumber":
        return JSNumber(~_as_i32(self.value))

    def exponentiate(self, other: "JSNumber") -> "JSNumber":
        return JSNumber(_pow(self.value, other.value))

    def multiply(self, other: "JSNumber") -> "JSNumber":
        return JSNumber(self.value * other.value)

    def divide(self, other: "JSNumber") -> "JSNumber":
        return JSNumber(_divide(self.value, other.value))

    def remainder(self, other: "JSNumber") -> "JSNumber":
        """Truncating remainder as computed by the % operator."""
        if self.is_nan() or other.is_nan():
            return JSNumber.NAN
        if self._is_infinite():
            return JSNumber.NAN
        if other._is_infinite():
            return self
        if other.is_zero():
            return JSNumber.NAN
        if self.is_zero():
            return self
        quotient = self.value / other.value
        q = float(math.trunc(quotient)) if math.isfinite(quotient) else quotient
        r = self.value - other.value * q
        if r == 0.0 and self.value < 0.0:
            return JSNumber.NEG_ZERO
        return JSNumber(r)

    def add(self, other: "JSNumber") -> "JSNumber":
        return JSNumber(self.value + other.value)

    def subtract(self, other: "JSNumber") -> "JSNumber":
        return JSNumber(self.value - other.value)

    def left_shift(self, other: "JSNumber") -> "JSNumber":
        lnum = _as_i32(self.value)
        shift_count = _as_u32(other.value) % 32
        return JSNumber(_wrap_i32(lnum << shift_count))

    def signed_right_shift(self, other: "JSNumber") -> "JSNumber":
        lnum = _as_i32(self.value)
        shift_count = _as_u32(other.value) % 32
        return JSNumber(lnum >> shift_count)

    def unsigned_right_shift(self, other: "JSNumber") -> "JSNumber":
        lnum = _as_u32(self.value)
        shift_count = _as_u32(other.value) % 32
        return JSNumber(lnum >> shift_count)

    def bitwise_and(self, other: "JSNumber") -> "JSNumber":
        return JSNumber(_as_i32(self.value) & _as_i32(other.value))

    def bitwise_xor(self, other: "JSNumber") -> "JSNumber":
        return JSNumber(_as_i32(self.value) ^ _as_i32(other.value))

    def bitwise_or(self, other: "JSNumber") -> "JSNumber":
        return JSNumber(_as_i32(self.value) | _as_i32(other.value))

    def equal(self, y: "JSNumber") -> bool:
        if self.is_nan() or y.is_nan():
            return False
        return self.value == y.value

    def less_than(self, y: "JSNumber") -> Optional[bool]:
        """Return the comparison, or None when either side is NaN."""
        if self.is_nan() or y.is_nan():
            return None
        return self.value < y.value

    def same_value(self, y: "JSNumber") -> bool:
        if self.is_nan() or y.is_nan():
            return True
        if (self._is_pos_zero() and y._is_neg_zero()) or (
            self._is_neg_zero() and y._is_pos_zero()
        ):
            return False
        return self == y

    def to_string(self, radix: int = 10) -> JSString:
        if self.is_nan():
            return JSString("NaN")
        if self.is_zero():
            return JSString("0")
        if self < JSNumber.ZERO:
            return JSString("-" + self.unary_minus().to_string(radix).value)
        if self.is_pos_infinite():
            return JSString("Infinity")
        return JSString(_format_float(self.value))

    @classmethod
    def from_string(cls, value: Union[JSString, str]) -> "JSNumber":
        """Parse a decimal floating-point literal; no surrounding whitespace allowed."""
        text = value.value if isinstance(value, JSString) else value
        if not _FLOAT_SYNTAX.fullmatch(text):
            raise ThrowCompletion(f"Invalid number conversion: {text}")
        return cls(float(text))

    @classmethod
    def from_value(cls, value: "JSValue") -> "JSNumber":
        """Extract the number held by a Number value."""
        if value.kind is ValueKind.NUMBER:
            return value.payload
        raise ThrowCompletion("Expected a Number value for conversion to a number")


JSNumber.NAN = JSNumber(math.nan)
JSNumber.ZERO = JSNumber(0.0)
JSNumber.POS_ZERO = JSNumber(0.0)
JSNumber.NEG_ZERO = JSNumber(-0.0)


class ValueKind(enum.Enum):
    UNDEFINED = "undefined"
    NULL = "null"
    BOOLEAN = "boolean"
    STRING = "string"
    NUMBER = "number"
    BIG_INT = "bigint"
    SYMBOL = "symbol"
    OBJECT = "object"


@dataclass(frozen=True, eq=False)
class JSValue:
    """A language value tagged with its type."""

    kind: ValueKind
    payload: Any = None

    def __repr__(self) -> str:
        if self.kind in (ValueKind.UNDEFINED, ValueKind.NULL):
            return f"JSValue({self.kind.name})"
        return f"JSValue({self.kind.name}, {self.payload!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JSValue):
            return NotImplemented
        if self.kind is not other.kind:
            return False
        if self.kind is ValueKind.OBJECT:
            return self.payload is other.payload
        return self.payload == other.payload

    def __hash__(self) -> int:
        if self.kind is ValueKind.OBJECT:
            return hash((self.kind, id(self.payload)))
        return hash((self.kind, self.payload))

    @classmethod
    def undefined(cls) -> "JSValue":
        return cls(ValueKind.UNDEFINED)

    @classmethod
    def null(cls) -> "JSValue":
        return cls(ValueKind.NULL)

    @classmethod
    def from_python(cls, value: Any) -> "JSValue":
        """Wrap a Python value; anything not otherwise recognised becomes an object."""
        if isinstance(value, JSValue):
            return value
        if value is None:
            raise TypeError("None has no single value; use undefined() or null()")
        if isinstance(value, bool):
            return cls(ValueKind.BOOLEAN, value)
        if isinstance(value, (int, float)):
            return cls(ValueKind.NUMBER, JSNumber(value))
        if isinstance(value, JSNumber):
            return cls(ValueKind.NUMBER, value)
        if isinstance(value, str):
            return cls(ValueKind.STRING, JSString(value))
        if isinstance(value, JSString):
            return cls(ValueKind.STRING, value)
        if isinstance(value, JSSymbol):
            return cls(ValueKind.SYMBOL, value)
        if isinstance(value, JSBigInt):
            return cls(ValueKind.BIG_INT, value)
        return cls(ValueKind.OBJECT, value)

    def is_undefined(self) -> bool:
        return self.kind is ValueKind.UNDEFINED

    def is_null(self) -> bool:
        return self.kind is ValueKind.NULL

    def is_boolean(self) -> bool:
        return self.kind is ValueKind.BOOLEAN

    def is_string(self) -> bool:
        return self.kind is ValueKind.STRING

    def is_number(self) -> bool:
        return self.kind is ValueKind.NUMBER

    def is_big_int(self) -> bool:
        return self.kind is ValueKind.BIG_INT

    def is_object(self) -> bool:
        return self.kind is ValueKind.OBJECT

    def is_symbol(self) -> bool:
        return self.kind is ValueKind.SYMBOL

    def is_nan(self) -> bool:
        return self.is_number() and self.payload.is_nan()

    def is_pos_infinite(self) -> bool:
        return self.is_number() and self.payload.is_pos_infinite()

    def is_neg_infinite(self) -> bool:
        return self.is_number() and self.payload.is_neg_infinite()

    def is_finite(self) -> bool:
        return self.is_number() and self.payload.is_finite()