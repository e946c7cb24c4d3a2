"""Codec configuration model.

This module defines the immutable :class:`CodecConfig` snapshot that drives
identifier generation, validation and parsing, together with helpers to build
it from plain mappings and YAML files.

Configuration is validated eagerly: every way of building a ``CodecConfig``
(direct construction, :meth:`CodecConfig.merge`, :func:`load_config`) checks
all fields and raises a :class:`~product_id_codec.errors.ConfigurationError`
subclass, so an invalid configuration never reaches the codec.
"""

import dataclasses
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from .errors import (
    ConfigFileNotFoundError,
    ConfigurationError,
    InvalidConfigFileError,
    InvalidConfigValueError,
    InvalidFormatConfigError,
)
from .logging import LogEvent, log_debug, log_error
from .type_registry import TYPE_CODE_LENGTH, validate_type_code


class IdFormat(str, Enum):
    """Identifier encoding schemes."""

    NUMERIC = "numeric"
    ALPHANUMERIC = "alphanumeric"
    CUSTOM = "custom"

    @classmethod
    def coerce(cls, value: Union["IdFormat", str]) -> "IdFormat":
        """Convert a format name (case-insensitive) to an :class:`IdFormat`.

        Raises:
            InvalidFormatConfigError: If the value names no known format
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidFormatConfigError(
            f"Unknown identifier format {value!r}. "
            f"Allowed formats: {', '.join(f.value for f in cls)}",
            format=value,
            allowed_formats=[f.value for f in cls],
        )


def _require_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfigValueError(
            f"'{name}' must be an integer, got {type(value).__name__}",
            field=name,
            value=value,
        )
    return value


def _require_str(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidConfigValueError(
            f"'{name}' must be a string, got {type(value).__name__}",
            field=name,
            value=value,
        )
    return value


def _require_bool(name: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise InvalidConfigValueError(
            f"'{name}' must be a boolean, got {type(value).__name__}",
            field=name,
            value=value,
        )
    return value


@dataclass(frozen=True)
class ValidationRules:
    """Bounds applied to every identifier by ``validate``.

    Attributes:
        required: Whether empty or blank identifiers are rejected
        min_length: Minimum total identifier length (inclusive)
        max_length: Maximum total identifier length (inclusive)
    """

    required: bool = True
    min_length: int = 1
    max_length: int = 50

    def __post_init__(self) -> None:
        _require_bool("validation.required", self.required)
        _require_int("validation.min_length", self.min_length)
        _require_int("validation.max_length", self.max_length)
        if self.min_length < 0:
            raise InvalidConfigValueError(
                f"'validation.min_length' must be non-negative, got {self.min_length}",
                field="validation.min_length",
                value=self.min_length,
            )
        if self.min_length > self.max_length:
            raise InvalidConfigValueError(
                f"'validation.min_length' ({self.min_length}) must not exceed "
                f"'validation.max_length' ({self.max_length})",
                field="validation",
                value=(self.min_length, self.max_length),
            )

    @classmethod
    def from_value(cls, value: Union["ValidationRules", Mapping[str, Any]]) -> "ValidationRules":
        """Build rules from a mapping; missing keys take the default bounds."""
        if isinstance(value, ValidationRules):
            return value
        if not isinstance(value, Mapping):
            raise InvalidConfigValueError(
                f"'validation' must be a mapping, got {type(value).__name__}",
                field="validation",
                value=value,
            )
        allowed = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(value) - allowed)
        if unknown:
            raise InvalidConfigValueError(
                f"Unknown validation field(s): {', '.join(map(str, unknown))}",
                field="validation",
                value=dict(value),
            )
        return cls(**value)

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)


@dataclass(frozen=True)
class CodecConfig:
    """Immutable snapshot of the codec configuration.

    Attributes:
        format: Active encoding scheme
        length: Target identifier body length
        prefix: Literal prepended to every generated identifier
        suffix: Literal appended to every generated identifier
        separator: Literal placed between prefix and body when both are non-empty
        allow_custom: Whether ``generate`` accepts caller-supplied identifiers
        validation: Bounds applied by ``validate``
        product_types: Category -> type code overrides for the type registry
    """

    format: IdFormat = IdFormat.NUMERIC
    length: int = 8
    prefix: str = ""
    suffix: str = ""
    separator: str = ""
    allow_custom: bool = True
    validation: ValidationRules = field(default_factory=ValidationRules)
    product_types: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "format", IdFormat.coerce(self.format))

        length = _require_int("length", self.length)
        if length <= 0:
            raise InvalidConfigValueError(
                f"'length' must be a positive integer, got {length}",
                field="length",
                value=length,
            )
        if self.format is IdFormat.CUSTOM and length <= TYPE_CODE_LENGTH:
            raise InvalidConfigValueError(
                f"'length' must be greater than {TYPE_CODE_LENGTH} for the custom format, got {length}",
                field="length",
                value=length,
            )

        _require_str("prefix", self.prefix)
        _require_str("suffix", self.suffix)
        _require_str("separator", self.separator)
        _require_bool("allow_custom", self.allow_custom)
        object.__setattr__(self, "validation", ValidationRules.from_value(self.validation))

        if not isinstance(self.product_types, Mapping):
            raise InvalidConfigValueError(
                f"'product_types' must be a mapping, got {type(self.product_types).__name__}",
                field="product_types",
                value=self.product_types,
            )
        product_types = {}
        for category, code in self.product_types.items():
            product_types[category] = validate_type_code(category, code)
        object.__setattr__(self, "product_types", MappingProxyType(product_types))

    @classmethod
    def field_names(cls) -> frozenset:
        return frozenset(f.name for f in dataclasses.fields(cls))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CodecConfig":
        """Build a configuration from a plain mapping.

        Args:
            data: Mapping using the ``CodecConfig`` field names

        Returns:
            A validated configuration; absent fields take their defaults

        Raises:
            ConfigurationError: If a field is unknown or invalid
        """
        return cls().merge(data)

    def merge(self, partial: Mapping[str, Any]) -> "CodecConfig":
        """Return a new configuration with ``partial`` shallowly merged in.

        Only top-level fields are replaced. A ``validation`` mapping is turned
        into a full :class:`ValidationRules`, with missing bounds defaulted.

        Raises:
            ConfigurationError: If a field is unknown or invalid
        """
        unknown = sorted(set(partial) - self.field_names())
        if unknown:
            raise InvalidConfigValueError(
                f"Unknown configuration field(s): {', '.join(map(str, unknown))}",
                field=str(unknown[0]),
                value=partial[unknown[0]],
            )
        return dataclasses.replace(self, **dict(partial))

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain-data view suitable for JSON or YAML output."""
        return {
            "format": self.format.value,
            "length": self.length,
            "prefix": self.prefix,
            "suffix": self.suffix,
            "separator": self.separator,
            "allow_custom": self.allow_custom,
            "validation": self.validation.to_dict(),
            "product_types": dict(self.product_types),
        }


DEFAULT_CONFIG = CodecConfig()


@dataclass
class ConfigResult:
    """Outcome of loading a configuration file.

    Attributes:
        success: Whether a valid configuration was read
        data: The loaded configuration (if successful)
        error: Error message (if unsuccessful)
        exception: The configuration error that was raised (if any)
        path: Path of the file that was read
    """

    success: bool
    data: Optional[CodecConfig] = None
    error: Optional[str] = None
    exception: Optional[ConfigurationError] = None
    path: Optional[str] = None


def load_config(path: Union[str, Path]) -> ConfigResult:
    """Load a configuration from a YAML file.

    Args:
        path: Path to the YAML document

    Returns:
        ConfigResult: ``data`` holds the :class:`CodecConfig` on success
    """
    path_str = os.fspath(path)
    if not os.path.isfile(path_str):
        error = ConfigFileNotFoundError(f"Configuration file not found: {path_str}", path=path_str)
        log_error(LogEvent.CONFIG_LOAD, error.message, path=path_str)
        return ConfigResult(success=False, error=error.message, exception=error, path=path_str)

    try:
        with open(path_str, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        error = InvalidConfigFileError(f"Could not read configuration file {path_str}: {e}", path=path_str)
        log_error(LogEvent.CONFIG_LOAD, error.message, path=path_str, error=str(e))
        return ConfigResult(success=False, error=error.message, exception=error, path=path_str)

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        error = InvalidConfigFileError(
            f"Configuration file {path_str} must contain a mapping, got {type(raw).__name__}",
            path=path_str,
        )
        log_error(LogEvent.CONFIG_LOAD, error.message, path=path_str)
        return ConfigResult(success=False, error=error.message, exception=error, path=path_str)

    try:
        config = CodecConfig.from_dict(raw)
    except ConfigurationError as e:
        e.path = path_str
        log_error(LogEvent.CONFIG_LOAD, f"Invalid configuration in {path_str}: {e}", path=path_str)
        return ConfigResult(success=False, error=str(e), exception=e, path=path_str)

    log_debug(LogEvent.CONFIG_LOAD, "Loaded codec configuration", path=path_str)
    return ConfigResult(success=True, data=config, path=path_str)
