"""
Data type descriptors.

Every scalar reports one of these. Descriptors hold no per-instance state:
two instances of the same class compare and hash equal, so
``Int8DataType() == Int8DataType()`` holds anywhere.

Type categories (FixedWidthType, IntegerType, FloatingPointType) are base
classes so callers can dispatch on ``isinstance``.
"""

from enum import Enum
from typing import Dict, Optional, Type, Union

import numpy as np

from .errors import UnknownDataTypeError


class TypeId(Enum):
    """Logical type identifiers. Values are the canonical type names."""
    NA = "null"
    BOOL = "bool"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT = "float"
    DOUBLE = "double"
    STRING = "string"
    BINARY = "binary"


class DataType:
    """
    Immutable descriptor of a logical data type.

    Subclasses set ``type_id`` (and ``numpy_dtype`` for fixed-width kinds).
    Equality and hashing go through ``type_id`` only.
    """

    __slots__ = ()

    type_id: Optional[TypeId] = None
    numpy_dtype: Optional[np.dtype] = None

    @property
    def id(self) -> TypeId:
        return self.type_id

    @property
    def name(self) -> str:
        """Canonical lowercase name, e.g. ``"int8"``."""
        return self.type_id.value

    @property
    def bit_width(self) -> Optional[int]:
        """Storage width in bits, None for variable-width kinds."""
        if self.numpy_dtype is None:
            return None
        return self.numpy_dtype.itemsize * 8

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other):
        if not isinstance(other, DataType):
            return NotImplemented
        return self.type_id == other.type_id

    def __hash__(self) -> int:
        return hash(self.type_id)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class NullDataType(DataType):
    """Type of values that are always null."""
    __slots__ = ()
    type_id = TypeId.NA


class FixedWidthType(DataType):
    """Base class for kinds stored in a fixed number of bits."""
    __slots__ = ()


class BooleanDataType(FixedWidthType):
    __slots__ = ()
    type_id = TypeId.BOOL
    numpy_dtype = np.dtype(np.bool_)

    @property
    def bit_width(self) -> int:
        # packed one bit per value in columnar storage
        return 1


class NumericType(FixedWidthType):
    """Base class for integer and floating-point kinds."""
    __slots__ = ()


class IntegerType(NumericType):
    """
    Base class for signed and unsigned integer kinds.

    Range bounds come from ``numpy.iinfo`` of the storage dtype.
    """

    __slots__ = ()

    @property
    def is_signed(self) -> bool:
        return self.numpy_dtype.kind == "i"

    @property
    def min_value(self) -> int:
        return int(np.iinfo(self.numpy_dtype).min)

    @property
    def max_value(self) -> int:
        return int(np.iinfo(self.numpy_dtype).max)


class Int8DataType(IntegerType):
    """8-bit signed integer."""
    __slots__ = ()
    type_id = TypeId.INT8
    numpy_dtype = np.dtype(np.int8)


class Int16DataType(IntegerType):
    """16-bit signed integer."""
    __slots__ = ()
    type_id = TypeId.INT16
    numpy_dtype = np.dtype(np.int16)


class Int32DataType(IntegerType):
    """32-bit signed integer."""
    __slots__ = ()
    type_id = TypeId.INT32
    numpy_dtype = np.dtype(np.int32)


class Int64DataType(IntegerType):
    """64-bit signed integer."""
    __slots__ = ()
    type_id = TypeId.INT64
    numpy_dtype = np.dtype(np.int64)


class UInt8DataType(IntegerType):
    """8-bit unsigned integer."""
    __slots__ = ()
    type_id = TypeId.UINT8
    numpy_dtype = np.dtype(np.uint8)


class UInt16DataType(IntegerType):
    """16-bit unsigned integer."""
    __slots__ = ()
    type_id = TypeId.UINT16
    numpy_dtype = np.dtype(np.uint16)


class UInt32DataType(IntegerType):
    """32-bit unsigned integer."""
    __slots__ = ()
    type_id = TypeId.UINT32
    numpy_dtype = np.dtype(np.uint32)


class UInt64DataType(IntegerType):
    """64-bit unsigned integer."""
    __slots__ = ()
    type_id = TypeId.UINT64
    numpy_dtype = np.dtype(np.uint64)


class FloatingPointType(NumericType):
    """Base class for IEEE 754 floating-point kinds."""

    __slots__ = ()

    @property
    def max_value(self) -> float:
        return float(np.finfo(self.numpy_dtype).max)


class FloatDataType(FloatingPointType):
    """32-bit floating point."""
    __slots__ = ()
    type_id = TypeId.FLOAT
    numpy_dtype = np.dtype(np.float32)


class DoubleDataType(FloatingPointType):
    """64-bit floating point."""
    __slots__ = ()
    type_id = TypeId.DOUBLE
    numpy_dtype = np.dtype(np.float64)


class StringDataType(DataType):
    """UTF-8 encoded string."""
    __slots__ = ()
    type_id = TypeId.STRING


class BinaryDataType(DataType):
    """Raw bytes."""
    __slots__ = ()
    type_id = TypeId.BINARY


_TYPES_BY_ID: Dict[TypeId, Type[DataType]] = {
    cls.type_id: cls
    for cls in (
        NullDataType,
        BooleanDataType,
        Int8DataType,
        Int16DataType,
        Int32DataType,
        Int64DataType,
        UInt8DataType,
        UInt16DataType,
        UInt32DataType,
        UInt64DataType,
        FloatDataType,
        DoubleDataType,
        StringDataType,
        BinaryDataType,
    )
}

# Accepted spellings besides the canonical names
_ALIASES: Dict[str, TypeId] = {
    "na": TypeId.NA,
    "boolean": TypeId.BOOL,
    "float32": TypeId.FLOAT,
    "float64": TypeId.DOUBLE,
    "utf8": TypeId.STRING,
    "str": TypeId.STRING,
    "bytes": TypeId.BINARY,
}


def data_type_for_id(type_id: TypeId) -> DataType:
    """Return the descriptor for a TypeId."""
    try:
        return _TYPES_BY_ID[type_id]()
    except KeyError:
        raise UnknownDataTypeError(f"Unknown type id: {type_id!r}") from None


def data_type_from_name(name: str) -> DataType:
    """
    Look up a descriptor by name.

    Args:
        name: Canonical name ("int8", "double", ...) or alias ("float64", "utf8")

    Returns:
        DataType instance

    Raises:
        UnknownDataTypeError: If the name is not recognised
    """
    key = name.strip().lower()
    if key in _ALIASES:
        return data_type_for_id(_ALIASES[key])
    try:
        return data_type_for_id(TypeId(key))
    except ValueError:
        available = ", ".join(t.value for t in TypeId)
        raise UnknownDataTypeError(
            f"Unknown data type: {name!r}. Available types: {available}"
        ) from None


def data_type_from_numpy(dtype) -> DataType:
    """Return the descriptor whose storage matches a numpy dtype."""
    dtype = np.dtype(dtype)
    for cls in _TYPES_BY_ID.values():
        if cls.numpy_dtype is not None and cls.numpy_dtype == dtype:
            return cls()
    raise UnknownDataTypeError(f"No data type for numpy dtype: {dtype}")


def resolve_data_type(data_type: Union[DataType, TypeId, str]) -> DataType:
    """Normalise a DataType, TypeId or type name to a DataType."""
    if isinstance(data_type, DataType):
        return data_type
    if isinstance(data_type, TypeId):
        return data_type_for_id(data_type)
    if isinstance(data_type, str):
        return data_type_from_name(data_type)
    raise UnknownDataTypeError(f"Cannot interpret {data_type!r} as a data type")
