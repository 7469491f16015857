"""
Core scalar model.

Data type descriptors, the scalar family, equality options and errors.
"""

from .errors import (
    ScalarError,
    ScalarTypeError,
    ScalarRangeError,
    ScalarParseError,
    ScalarCastError,
    UnknownDataTypeError,
)
from .options import EqualOptions
from .types import (
    TypeId,
    DataType,
    NullDataType,
    FixedWidthType,
    BooleanDataType,
    NumericType,
    IntegerType,
    Int8DataType,
    Int16DataType,
    Int32DataType,
    Int64DataType,
    UInt8DataType,
    UInt16DataType,
    UInt32DataType,
    UInt64DataType,
    FloatingPointType,
    FloatDataType,
    DoubleDataType,
    StringDataType,
    BinaryDataType,
    data_type_for_id,
    data_type_from_name,
    data_type_from_numpy,
    resolve_data_type,
)
from .scalars import (
    Scalar,
    NullScalar,
    BooleanScalar,
    NumericScalar,
    IntegerScalar,
    Int8Scalar,
    Int16Scalar,
    Int32Scalar,
    Int64Scalar,
    UInt8Scalar,
    UInt16Scalar,
    UInt32Scalar,
    UInt64Scalar,
    FloatingPointScalar,
    FloatScalar,
    DoubleScalar,
    StringScalar,
    BinaryScalar,
)

BUILTIN_SCALARS = (
    NullScalar,
    BooleanScalar,
    Int8Scalar,
    Int16Scalar,
    Int32Scalar,
    Int64Scalar,
    UInt8Scalar,
    UInt16Scalar,
    UInt32Scalar,
    UInt64Scalar,
    FloatScalar,
    DoubleScalar,
    StringScalar,
    BinaryScalar,
)

__all__ = [
    # Errors
    "ScalarError",
    "ScalarTypeError",
    "ScalarRangeError",
    "ScalarParseError",
    "ScalarCastError",
    "UnknownDataTypeError",
    "EqualOptions",
    # Data types
    "TypeId",
    "DataType",
    "NullDataType",
    "FixedWidthType",
    "BooleanDataType",
    "NumericType",
    "IntegerType",
    "Int8DataType",
    "Int16DataType",
    "Int32DataType",
    "Int64DataType",
    "UInt8DataType",
    "UInt16DataType",
    "UInt32DataType",
    "UInt64DataType",
    "FloatingPointType",
    "FloatDataType",
    "DoubleDataType",
    "StringDataType",
    "BinaryDataType",
    "data_type_for_id",
    "data_type_from_name",
    "data_type_from_numpy",
    "resolve_data_type",
    # Scalars
    "Scalar",
    "NullScalar",
    "BooleanScalar",
    "NumericScalar",
    "IntegerScalar",
    "Int8Scalar",
    "Int16Scalar",
    "Int32Scalar",
    "Int64Scalar",
    "UInt8Scalar",
    "UInt16Scalar",
    "UInt32Scalar",
    "UInt64Scalar",
    "FloatingPointScalar",
    "FloatScalar",
    "DoubleScalar",
    "StringScalar",
    "BinaryScalar",
    "BUILTIN_SCALARS",
]
