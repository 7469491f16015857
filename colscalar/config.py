"""
Scalar configuration.

Controls how scalars render and which kinds the ``scalar()`` factory infers
for plain Python numbers. Configuration can be loaded from a YAML file:

    null_token: "null"
    binary_uppercase: true
    default_integer_type: int64
    default_float_type: double
"""

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional
import logging
import re

import yaml

logger = logging.getLogger(__name__)

# Renderings a valid scalar can produce that the null token must not shadow
_RESERVED_TOKENS = {"true", "false", "nan", "inf", "-inf", "+inf"}
_NUMBER_PATTERN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
# Even-length hex text is a binary rendering
_HEX_PATTERN = re.compile(r"(?:[0-9A-Fa-f]{2})+")


@dataclass(frozen=True)
class ScalarConfig:
    """Rendering and inference settings shared by all scalars."""

    null_token: str = "null"  # rendering of every null scalar
    binary_uppercase: bool = True  # hex case for binary scalars
    default_integer_type: str = "int64"  # kind inferred for Python int
    default_float_type: str = "double"  # kind inferred for Python float

    def validate(self) -> None:
        """
        Validate configuration.

        Raises:
            ValueError: If the null token could be mistaken for a valid
                rendering, or a default type has the wrong family
        """
        token = self.null_token
        if not isinstance(token, str) or not token.strip():
            raise ValueError("null_token must be a non-empty string")
        stripped = token.strip()
        if (
            stripped.lower() in _RESERVED_TOKENS
            or _NUMBER_PATTERN.match(stripped)
            or _HEX_PATTERN.fullmatch(token)
        ):
            raise ValueError(
                f"null_token {token!r} collides with the rendering of a valid value"
            )

        # Import here to avoid circular dependency
        from .core.errors import UnknownDataTypeError
        from .core.types import FloatingPointType, IntegerType, resolve_data_type

        try:
            integer_type = resolve_data_type(self.default_integer_type)
            float_type = resolve_data_type(self.default_float_type)
        except UnknownDataTypeError as e:
            raise ValueError(f"Invalid default type: {e}") from e

        if not isinstance(integer_type, IntegerType):
            raise ValueError(
                f"default_integer_type must be an integer type, got {self.default_integer_type!r}"
            )
        if not isinstance(float_type, FloatingPointType):
            raise ValueError(
                f"default_float_type must be a floating-point type, got {self.default_float_type!r}"
            )


def load_config(config_path: str) -> ScalarConfig:
    """
    Load scalar configuration from a YAML file.

    Unknown keys are ignored with a warning; missing keys keep their defaults.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated ScalarConfig instance
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    known = {f.name for f in fields(ScalarConfig)}
    for key in data:
        if key not in known:
            logger.warning(f"Ignoring unknown config key: {key}")

    config = ScalarConfig(**{k: v for k, v in data.items() if k in known})
    config.validate()
    logger.info(f"Loaded scalar config from {path}")
    return config


_active_config = ScalarConfig()


def get_config() -> ScalarConfig:
    """Return the process-wide active configuration."""
    return _active_config


def set_config(config: Optional[ScalarConfig] = None, **overrides) -> ScalarConfig:
    """
    Replace the active configuration.

    Args:
        config: New configuration (defaults to the current one)
        **overrides: Individual fields to change

    Returns:
        The configuration now active
    """
    global _active_config
    new_config = replace(config or _active_config, **overrides)
    new_config.validate()
    _active_config = new_config
    logger.debug(f"Active scalar config: {new_config}")
    return new_config


def reset_config() -> ScalarConfig:
    """Restore the default configuration."""
    global _active_config
    _active_config = ScalarConfig()
    return _active_config
