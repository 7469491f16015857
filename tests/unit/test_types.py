"""
Tests for data type descriptors.
"""

import pytest
import numpy as np

from colscalar import (
    TypeId,
    DataType,
    BooleanDataType,
    DoubleDataType,
    FloatDataType,
    Int8DataType,
    Int64DataType,
    NullDataType,
    StringDataType,
    BinaryDataType,
    UInt8DataType,
    UInt64DataType,
    UnknownDataTypeError,
    data_type_from_name,
    resolve_data_type,
)
from colscalar.core.types import data_type_for_id, data_type_from_numpy


class TestDataTypeEquality:
    """Descriptors compare by kind, not identity."""

    def test_same_class_equal(self) -> None:
        assert Int8DataType() == Int8DataType()
        assert Int8DataType() is not Int8DataType()

    def test_different_class_not_equal(self) -> None:
        assert Int8DataType() != UInt8DataType()
        assert FloatDataType() != DoubleDataType()

    def test_hash_matches_equality(self) -> None:
        assert hash(Int8DataType()) == hash(Int8DataType())
        assert len({Int8DataType(), Int8DataType(), StringDataType()}) == 2

    def test_not_equal_to_string_name(self) -> None:
        """A descriptor is not equal to its own name."""
        assert Int8DataType() != "int8"

    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            Int8DataType().type_id = TypeId.INT16


class TestDataTypeProperties:
    """Test descriptor metadata."""

    @pytest.mark.parametrize(
        "data_type,name,bit_width",
        [
            (NullDataType(), "null", None),
            (BooleanDataType(), "bool", 1),
            (Int8DataType(), "int8", 8),
            (Int64DataType(), "int64", 64),
            (UInt64DataType(), "uint64", 64),
            (FloatDataType(), "float", 32),
            (DoubleDataType(), "double", 64),
            (StringDataType(), "string", None),
            (BinaryDataType(), "binary", None),
        ],
    )
    def test_name_and_width(self, data_type: DataType, name: str, bit_width) -> None:
        assert data_type.name == name
        assert str(data_type) == name
        assert data_type.bit_width == bit_width

    def test_unsigned_range(self) -> None:
        data_type = UInt8DataType()
        assert not data_type.is_signed
        assert data_type.min_value == 0
        assert data_type.max_value == 255

    def test_uint64_max_is_python_int(self) -> None:
        assert UInt64DataType().max_value == 2**64 - 1

    def test_repr(self) -> None:
        assert repr(Int8DataType()) == "Int8DataType()"

    def test_id_property(self) -> None:
        assert Int8DataType().id is TypeId.INT8


class TestDataTypeLookup:
    """Test lookup by name, id and numpy dtype."""

    def test_from_canonical_name(self) -> None:
        for type_id in TypeId:
            assert data_type_from_name(type_id.value).type_id is type_id

    @pytest.mark.parametrize(
        "alias,expected",
        [("float64", DoubleDataType()), ("float32", FloatDataType()), ("utf8", StringDataType()), (" INT8 ", Int8DataType())],
    )
    def test_aliases(self, alias: str, expected: DataType) -> None:
        assert data_type_from_name(alias) == expected

    def test_unknown_name(self) -> None:
        with pytest.raises(UnknownDataTypeError, match="Unknown data type"):
            data_type_from_name("int7")

    def test_for_id(self) -> None:
        assert data_type_for_id(TypeId.UINT8) == UInt8DataType()

    def test_from_numpy(self) -> None:
        assert data_type_from_numpy(np.int8) == Int8DataType()
        assert data_type_from_numpy(np.dtype("float32")) == FloatDataType()
        assert data_type_from_numpy(np.bool_) == BooleanDataType()

    def test_from_numpy_unknown(self) -> None:
        with pytest.raises(UnknownDataTypeError):
            data_type_from_numpy(np.complex128)

    def test_resolve_accepts_all_forms(self) -> None:
        assert resolve_data_type(Int8DataType()) == Int8DataType()
        assert resolve_data_type(TypeId.INT8) == Int8DataType()
        assert resolve_data_type("int8") == Int8DataType()

    def test_resolve_rejects_other_objects(self) -> None:
        with pytest.raises(UnknownDataTypeError):
            resolve_data_type(8)

    def test_unknown_type_error_is_key_error(self) -> None:
        with pytest.raises(KeyError):
            data_type_from_name("decimal")
