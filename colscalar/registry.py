"""
Scalar Registry - maps data types to scalar classes.

Built-in kinds register themselves when ``colscalar`` is imported. The
``scalar()`` factory builds a scalar from a Python value, either for an
explicit data type or by inferring one.
"""

from typing import Any, Dict, List, Optional, Type, Union
import logging

import numpy as np

from .config import get_config
from .core.errors import UnknownDataTypeError
from .core.scalars import Scalar
from .core.types import (
    DataType,
    TypeId,
    data_type_from_numpy,
    resolve_data_type,
)

logger = logging.getLogger(__name__)


class ScalarRegistry:
    """
    Registry of scalar classes keyed by TypeId.

    ``cast`` and ``parse`` resolve their target class through this registry,
    so a replacement class registered here is picked up everywhere.
    """

    _scalars: Dict[TypeId, Type[Scalar]] = {}

    @classmethod
    def register(
        cls,
        data_type: Union[DataType, TypeId, str],
        scalar_class: Type[Scalar],
    ) -> None:
        """
        Register a scalar class for a data type.

        Args:
            data_type: DataType, TypeId or type name
            scalar_class: Scalar subclass whose ``data_type_class`` matches
        """
        type_id = resolve_data_type(data_type).type_id
        if scalar_class.data_type_class.type_id is not type_id:
            raise ValueError(
                f"{scalar_class.__name__} holds {scalar_class.data_type_class.type_id.value}, "
                f"cannot register it for {type_id.value}"
            )

        if type_id in cls._scalars:
            logger.warning(
                f"Scalar type '{type_id.value}' already registered. "
                f"Overwriting with {scalar_class.__name__}"
            )

        cls._scalars[type_id] = scalar_class
        logger.info(f"Registered scalar: {type_id.value} -> {scalar_class.__name__}")

    @classmethod
    def scalar_class_for(cls, data_type: Union[DataType, TypeId, str]) -> Type[Scalar]:
        """
        Look up the scalar class for a data type.

        Raises:
            UnknownDataTypeError: If no class is registered for the type
        """
        type_id = resolve_data_type(data_type).type_id
        if type_id not in cls._scalars:
            available = ", ".join(cls.list_types())
            raise UnknownDataTypeError(
                f"No scalar registered for {type_id.value}. "
                f"Registered types: {available}"
            )
        return cls._scalars[type_id]

    @classmethod
    def create(cls, data_type: Union[DataType, TypeId, str], value: Any = None) -> Scalar:
        """Build a scalar of the given type (null when value is None)."""
        return cls.scalar_class_for(data_type)(value)

    @classmethod
    def list_types(cls) -> List[str]:
        """List the names of all registered types."""
        return [type_id.value for type_id in cls._scalars]

    @classmethod
    def is_registered(cls, data_type: Union[DataType, TypeId, str]) -> bool:
        try:
            type_id = resolve_data_type(data_type).type_id
        except UnknownDataTypeError:
            return False
        return type_id in cls._scalars

    @classmethod
    def unregister(cls, data_type: Union[DataType, TypeId, str]) -> None:
        """
        Unregister a scalar class (mainly for testing).

        Args:
            data_type: DataType, TypeId or type name to unregister
        """
        type_id = resolve_data_type(data_type).type_id
        if type_id in cls._scalars:
            del cls._scalars[type_id]
            logger.info(f"Unregistered scalar: {type_id.value}")


def infer_data_type(value: Any) -> DataType:
    """
    Infer the data type for a Python or numpy value.

    Python ints and floats map to the configured defaults (int64 / double
    unless overridden); numpy scalars keep their own width.

    Raises:
        UnknownDataTypeError: If no kind matches the value
    """
    config = get_config()
    if value is None:
        return resolve_data_type(TypeId.NA)
    if isinstance(value, str):
        return resolve_data_type(TypeId.STRING)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return resolve_data_type(TypeId.BINARY)
    if isinstance(value, np.generic):
        return data_type_from_numpy(value.dtype)
    if isinstance(value, bool):
        return resolve_data_type(TypeId.BOOL)
    if isinstance(value, int):
        return resolve_data_type(config.default_integer_type)
    if isinstance(value, float):
        return resolve_data_type(config.default_float_type)
    raise UnknownDataTypeError(f"Cannot infer a data type for {type(value).__name__}")


def scalar(value: Any, data_type: Optional[Union[DataType, TypeId, str]] = None) -> Scalar:
    """
    Convenience function to build a scalar.

    Args:
        value: Python or numpy value, or None for a null
        data_type: Target type (inferred from value if None)

    Returns:
        Scalar instance

    Example:
        >>> scalar(-128, "int8")
        <Int8Scalar: -128>
        >>> scalar(1.5)
        <DoubleScalar: 1.5>
        >>> scalar(None, "int8").is_valid
        False
    """
    if isinstance(value, Scalar):
        return value if data_type is None else value.cast(data_type)
    if data_type is None:
        data_type = infer_data_type(value)
    return ScalarRegistry.create(data_type, value)


def register_scalar(data_type: Union[DataType, TypeId, str]):
    """
    Decorator for registering scalar classes.

    Example:
        @register_scalar("int8")
        class CheckedInt8Scalar(Int8Scalar):
            ...
    """

    def decorator(cls):
        ScalarRegistry.register(data_type, cls)
        return cls

    return decorator

