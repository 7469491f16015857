"""
Typed nullable scalars.

A scalar is one value of a fixed primitive kind, or a null of that kind.
Scalars are immutable value objects: they compare and hash by kind,
validity and payload, never by identity.

Fixed-width payloads are stored as numpy scalars of the kind's storage
dtype; ``value`` and ``as_py()`` hand back native Python objects.
"""

import logging
import math
import re
from typing import Any, Optional, Type, Union

import numpy as np

from ..config import get_config
from .errors import (
    ScalarCastError,
    ScalarParseError,
    ScalarRangeError,
    ScalarTypeError,
)
from .options import EqualOptions
from .types import (
    BinaryDataType,
    BooleanDataType,
    DataType,
    DoubleDataType,
    FloatDataType,
    Int8DataType,
    Int16DataType,
    Int32DataType,
    Int64DataType,
    NullDataType,
    StringDataType,
    TypeId,
    UInt8DataType,
    UInt16DataType,
    UInt32DataType,
    UInt64DataType,
    resolve_data_type,
)

logger = logging.getLogger(__name__)

_INTEGER_TEXT = re.compile(r"[+-]?[0-9]+")
_INFINITY_TEXT = {"inf", "infinity"}


class Scalar:
    """
    Base class for all scalars.

    Subclasses set ``data_type_class`` and ``_null_value`` and implement
    ``_coerce`` (validate and store a constructor argument), ``_format``
    (render a valid payload) and optionally ``_from_scalar`` /
    ``_parse_value`` for casting and parsing.

    Passing ``None`` (or nothing) to the constructor builds a null scalar.
    """

    __slots__ = ("_value", "_is_valid")

    data_type_class: Type[DataType] = DataType
    _null_value: Any = None

    def __init__(self, value: Any = None):
        if self.data_type_class.type_id is None:
            raise TypeError(
                f"{type(self).__name__} is abstract; instantiate a concrete kind or use scalar()"
            )
        if value is None:
            object.__setattr__(self, "_value", self._null_value)
            object.__setattr__(self, "_is_valid", False)
        else:
            object.__setattr__(self, "_value", self._coerce(value))
            object.__setattr__(self, "_is_valid", True)

    def _coerce(self, value: Any) -> Any:
        raise NotImplementedError

    # Queries

    @property
    def data_type(self) -> DataType:
        """Descriptor of this scalar's kind."""
        return self.data_type_class()

    @property
    def is_valid(self) -> bool:
        """True when the scalar carries a value, False when it is null."""
        return self._is_valid

    @property
    def value(self) -> Any:
        """
        The payload as a native Python object.

        Only meaningful when ``is_valid`` is True. A null scalar returns the
        kind's zero sentinel (``0``, ``0.0``, ``False``, ``""``, ``b""``).
        """
        if not self._is_valid:
            return self._null_value
        return self._to_py(self._value)

    @property
    def raw_value(self) -> Any:
        """The stored payload (numpy scalar for fixed-width kinds)."""
        return self._value

    def as_py(self) -> Any:
        """The payload as a native Python object, or None when null."""
        if not self._is_valid:
            return None
        return self._to_py(self._value)

    def _to_py(self, raw: Any) -> Any:
        return raw

    # Rendering

    def to_string(self) -> str:
        """Canonical text: the formatted payload, or the null token."""
        if not self._is_valid:
            return get_config().null_token
        return self._format(self._value)

    def _format(self, raw: Any) -> str:
        return str(raw)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {self.to_string()}>"

    # Equality

    def equal(self, other: "Scalar", options: Optional[EqualOptions] = None) -> bool:
        """
        Structural equality.

        Scalars are equal when they share a kind and are either both null or
        both valid with equal payloads. Null payloads are never compared.

        Args:
            other: Scalar to compare with
            options: Floating-point comparison options (exact by default)

        Returns:
            True if the scalars are equal
        """
        if not isinstance(other, Scalar):
            return False
        if self.data_type != other.data_type:
            return False
        if not (self._is_valid and other._is_valid):
            return self._is_valid == other._is_valid
        return self._payload_equal(other._value, options or EqualOptions.defaults())

    def _payload_equal(self, other_raw: Any, options: EqualOptions) -> bool:
        return bool(self._value == other_raw)

    def __eq__(self, other):
        if not isinstance(other, Scalar):
            return NotImplemented
        return self.equal(other)

    def __hash__(self) -> int:
        if not self._is_valid:
            return hash((self.data_type_class.type_id, None))
        return hash((self.data_type_class.type_id, self._hash_payload()))

    def _hash_payload(self) -> Any:
        return self.value

    # Immutability

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self.as_py(),))

    # Conversion

    def cast(self, data_type: Union[DataType, TypeId, str]) -> "Scalar":
        """
        Convert to another kind.

        Nulls cast to nulls of the target kind. Numeric casts are range
        checked; float to integer requires an integral value. Anything casts
        to string through its rendering, and strings cast to other kinds by
        parsing.

        Args:
            data_type: Target DataType, TypeId or type name

        Returns:
            Scalar of the target kind

        Raises:
            ScalarCastError: If the cast is unsupported or would truncate
            ScalarRangeError: If the value does not fit the target kind
            ScalarParseError: If a string source cannot be parsed
        """
        # Import here to avoid circular dependency
        from ..registry import ScalarRegistry

        target = resolve_data_type(data_type)
        target_class = ScalarRegistry.scalar_class_for(target)

        if not self._is_valid or target.type_id is TypeId.NA:
            return target_class()
        if target == self.data_type:
            return self

        logger.debug(f"Casting {self!r} to {target}")
        if isinstance(self, StringScalar) and target.type_id is not TypeId.BINARY:
            return target_class._parse_value(self._value)
        return target_class._from_scalar(self)

    @classmethod
    def _from_scalar(cls, source: "Scalar") -> "Scalar":
        raise ScalarCastError(
            f"Unsupported cast from {source.data_type} to {cls.data_type_class()}"
        )

    @classmethod
    def parse(
        cls,
        text: str,
        data_type: Optional[Union[DataType, TypeId, str]] = None,
    ) -> "Scalar":
        """
        Parse a textual rendering.

        On a concrete class the kind defaults to that class
        (``Int8Scalar.parse("-128")``); on ``Scalar`` it must be given
        (``Scalar.parse("-128", "int8")``). The null token parses to a null
        scalar, except for string and binary kinds which take text literally.

        Raises:
            ScalarParseError: If the text is not a valid rendering
        """
        if data_type is None:
            if cls is Scalar:
                raise ScalarTypeError("Scalar.parse requires a data_type")
            target_class = cls
        else:
            # Import here to avoid circular dependency
            from ..registry import ScalarRegistry

            target_class = ScalarRegistry.scalar_class_for(resolve_data_type(data_type))

        if not isinstance(text, str):
            raise ScalarTypeError(f"parse requires str, got {type(text).__name__}")
        return target_class._parse_text(text)

    @classmethod
    def _parse_text(cls, text: str) -> "Scalar":
        if text == get_config().null_token:
            return cls()
        return cls._parse_value(text)

    @classmethod
    def _parse_value(cls, text: str) -> "Scalar":
        raise ScalarParseError(
            f"Failed to parse {text!r} as a scalar of type {cls.data_type_class()}"
        )


class NullScalar(Scalar):
    """Scalar of the null type. Always invalid."""

    __slots__ = ()
    data_type_class = NullDataType

    def _coerce(self, value: Any) -> Any:
        raise ScalarTypeError(f"NullScalar cannot hold a value, got {value!r}")

    @classmethod
    def _from_scalar(cls, source: Scalar) -> Scalar:
        return cls()


class BooleanScalar(Scalar):
    __slots__ = ()
    data_type_class = BooleanDataType
    _null_value = False

    def _coerce(self, value: Any) -> Any:
        if not isinstance(value, (bool, np.bool_)):
            raise ScalarTypeError(f"BooleanScalar requires a bool, got {type(value).__name__}")
        return np.bool_(value)

    def _to_py(self, raw: Any) -> bool:
        return bool(raw)

    def _format(self, raw: Any) -> str:
        return "true" if raw else "false"

    @classmethod
    def _from_scalar(cls, source: Scalar) -> Scalar:
        if isinstance(source, NumericScalar):
            return cls(bool(source.value != 0))
        return super()._from_scalar(source)

    @classmethod
    def _parse_value(cls, text: str) -> Scalar:
        lowered = text.lower()
        if lowered in ("true", "1"):
            return cls(True)
        if lowered in ("false", "0"):
            return cls(False)
        return super()._parse_value(text)


class NumericScalar(Scalar):
    """Base class for integer and floating-point scalars."""
    __slots__ = ()


class IntegerScalar(NumericScalar):
    """
    Base class for fixed-width integer scalars.

    Values are stored as given: out-of-range values are rejected with
    ScalarRangeError rather than clamped or wrapped.
    """

    __slots__ = ()
    _null_value = 0

    def _coerce(self, value: Any) -> Any:
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
            raise ScalarTypeError(
                f"{type(self).__name__} requires an integer, got {type(value).__name__}"
            )
        data_type = self.data_type_class()
        number = int(value)
        if not data_type.min_value <= number <= data_type.max_value:
            raise ScalarRangeError(
                f"{number} is out of range for {data_type} "
                f"[{data_type.min_value}, {data_type.max_value}]"
            )
        return data_type.numpy_dtype.type(number)

    def _to_py(self, raw: Any) -> int:
        return int(raw)

    def _format(self, raw: Any) -> str:
        return str(int(raw))

    @classmethod
    def _from_scalar(cls, source: Scalar) -> Scalar:
        if isinstance(source, (BooleanScalar, IntegerScalar)):
            return cls(int(source.value))
        if isinstance(source, FloatingPointScalar):
            number = source.value
            if not math.isfinite(number) or not number.is_integer():
                raise ScalarCastError(
                    f"Casting {number} to {cls.data_type_class()} would truncate"
                )
            return cls(int(number))
        return super()._from_scalar(source)

    @classmethod
    def _parse_value(cls, text: str) -> Scalar:
        if not _INTEGER_TEXT.fullmatch(text):
            return super()._parse_value(text)
        try:
            return cls(int(text))
        except ScalarRangeError as e:
            raise ScalarParseError(
                f"Failed to parse {text!r} as a scalar of type {cls.data_type_class()}: {e}"
            ) from e


class FloatingPointScalar(NumericScalar):
    """
    Base class for IEEE 754 scalars.

    Equality is IEEE by default (NaN != NaN); pass EqualOptions to
    ``equal`` for NaN-aware or approximate comparison.
    """

    __slots__ = ()
    _null_value = 0.0

    def _coerce(self, value: Any) -> Any:
        if isinstance(value, (bool, np.bool_)) or not isinstance(
            value, (int, float, np.integer, np.floating)
        ):
            raise ScalarTypeError(
                f"{type(self).__name__} requires a number, got {type(value).__name__}"
            )
        data_type = self.data_type_class()
        try:
            number = float(value)
        except OverflowError:
            raise ScalarRangeError(f"{value} is out of range for {data_type}") from None
        with np.errstate(over="ignore"):
            stored = data_type.numpy_dtype.type(number)
        # rounding to the storage width decides the range, not the double value
        if math.isfinite(number) and np.isinf(stored):
            raise ScalarRangeError(f"{number} is out of range for {data_type}")
        return stored

    def _to_py(self, raw: Any) -> float:
        return float(raw)

    def _format(self, raw: Any) -> str:
        # numpy prints the shortest repr that round-trips at the storage width
        return str(raw)

    def _payload_equal(self, other_raw: Any, options: EqualOptions) -> bool:
        left, right = float(self._value), float(other_raw)
        if math.isnan(left) or math.isnan(right):
            return options.nans_equal and math.isnan(left) and math.isnan(right)
        if left == right:
            return True
        return options.approx and abs(left - right) <= options.atol

    def _hash_payload(self) -> Any:
        number = float(self._value)
        # hash(nan) is identity based; all NaNs share one bucket
        return "nan" if math.isnan(number) else number

    @classmethod
    def _from_scalar(cls, source: Scalar) -> Scalar:
        if isinstance(source, (BooleanScalar, NumericScalar)):
            return cls(float(source.value))
        return super()._from_scalar(source)

    @classmethod
    def _parse_value(cls, text: str) -> Scalar:
        try:
            number = float(text)
        except ValueError:
            return super()._parse_value(text)
        if math.isinf(number) and text.strip().lstrip("+-").lower() not in _INFINITY_TEXT:
            raise ScalarParseError(
                f"Failed to parse {text!r} as a scalar of type {cls.data_type_class()}: "
                f"value overflows to infinity"
            )
        try:
            return cls(number)
        except ScalarRangeError as e:
            raise ScalarParseError(
                f"Failed to parse {text!r} as a scalar of type {cls.data_type_class()}: {e}"
            ) from e


class Int8Scalar(IntegerScalar):
    """
    Signed 8-bit integer scalar.

    Example:
        >>> s = Int8Scalar(-128)
        >>> s.is_valid, s.value, str(s)
        (True, -128, '-128')
        >>> s.data_type == Int8DataType()
        True
        >>> str(Int8Scalar())
        'null'
    """
    __slots__ = ()
    data_type_class = Int8DataType


class Int16Scalar(IntegerScalar):
    __slots__ = ()
    data_type_class = Int16DataType


class Int32Scalar(IntegerScalar):
    __slots__ = ()
    data_type_class = Int32DataType


class Int64Scalar(IntegerScalar):
    __slots__ = ()
    data_type_class = Int64DataType


class UInt8Scalar(IntegerScalar):
    __slots__ = ()
    data_type_class = UInt8DataType


class UInt16Scalar(IntegerScalar):
    __slots__ = ()
    data_type_class = UInt16DataType


class UInt32Scalar(IntegerScalar):
    __slots__ = ()
    data_type_class = UInt32DataType


class UInt64Scalar(IntegerScalar):
    __slots__ = ()
    data_type_class = UInt64DataType


class FloatScalar(FloatingPointScalar):
    """32-bit floating-point scalar."""
    __slots__ = ()
    data_type_class = FloatDataType


class DoubleScalar(FloatingPointScalar):
    """64-bit floating-point scalar."""
    __slots__ = ()
    data_type_class = DoubleDataType


class StringScalar(Scalar):
    """UTF-8 string scalar. Renders its text unchanged."""

    __slots__ = ()
    data_type_class = StringDataType
    _null_value = ""

    def _coerce(self, value: Any) -> Any:
        if not isinstance(value, str):
            raise ScalarTypeError(f"StringScalar requires str, got {type(value).__name__}")
        return str(value)

    @classmethod
    def _from_scalar(cls, source: Scalar) -> Scalar:
        if isinstance(source, BinaryScalar):
            try:
                return cls(source.value.decode("utf-8"))
            except UnicodeDecodeError as e:
                raise ScalarCastError(f"Binary value is not valid UTF-8: {e}") from e
        return cls(source.to_string())

    @classmethod
    def _parse_text(cls, text: str) -> Scalar:
        return cls(text)


class BinaryScalar(Scalar):
    """Raw bytes scalar. Renders as hex."""

    __slots__ = ()
    data_type_class = BinaryDataType
    _null_value = b""

    def _coerce(self, value: Any) -> Any:
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise ScalarTypeError(f"BinaryScalar requires bytes, got {type(value).__name__}")
        return bytes(value)

    def _format(self, raw: Any) -> str:
        text = raw.hex()
        return text.upper() if get_config().binary_uppercase else text

    @classmethod
    def _from_scalar(cls, source: Scalar) -> Scalar:
        if isinstance(source, StringScalar):
            return cls(source.value.encode("utf-8"))
        return super()._from_scalar(source)

    @classmethod
    def _parse_text(cls, text: str) -> Scalar:
        return cls(text.encode("utf-8"))
