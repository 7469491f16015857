"""
colscalar - typed nullable scalars for columnar data.

Usage:
    from colscalar import Int8Scalar, Int8DataType, scalar

    s = Int8Scalar(-128)
    s.is_valid                      # True
    s.value                         # -128
    str(s)                          # "-128"
    s.data_type == Int8DataType()   # True
    s == scalar(-128, "int8")       # True
    str(Int8Scalar())               # "null"
"""

from .core import (
    # Errors and options
    ScalarError,
    ScalarTypeError,
    ScalarRangeError,
    ScalarParseError,
    ScalarCastError,
    UnknownDataTypeError,
    EqualOptions,
    # Data types
    TypeId,
    DataType,
    NullDataType,
    BooleanDataType,
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
    data_type_from_name,
    resolve_data_type,
    # Scalars
    Scalar,
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
    BUILTIN_SCALARS,
)
from .config import ScalarConfig, load_config, get_config, set_config, reset_config
from .registry import ScalarRegistry, infer_data_type, scalar, register_scalar

# Register built-in kinds with the registry
for _scalar_class in BUILTIN_SCALARS:
    ScalarRegistry.register(_scalar_class.data_type_class.type_id, _scalar_class)
del _scalar_class

__all__ = [
    "ScalarError",
    "ScalarTypeError",
    "ScalarRangeError",
    "ScalarParseError",
    "ScalarCastError",
    "UnknownDataTypeError",
    "EqualOptions",
    "TypeId",
    "DataType",
    "NullDataType",
    "BooleanDataType",
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
    "data_type_from_name",
    "resolve_data_type",
    "Scalar",
    "NullScalar",
    "BooleanScalar",
    "Int8Scalar",
    "Int16Scalar",
    "Int32Scalar",
    "Int64Scalar",
    "UInt8Scalar",
    "UInt16Scalar",
    "UInt32Scalar",
    "UInt64Scalar",
    "FloatScalar",
    "DoubleScalar",
    "StringScalar",
    "BinaryScalar",
    "ScalarConfig",
    "load_config",
    "get_config",
    "set_config",
    "reset_config",
    "ScalarRegistry",
    "infer_data_type",
    "scalar",
    "register_scalar",
]

__version__ = "0.1.0"
