"""Product identifier codec.

This package generates, validates and parses opaque product identifiers under
three interchangeable encoding schemes (numeric, alphanumeric and custom
type-coded), with configurable prefix, suffix, separator and validation bounds.
"""

# Version of the package
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _version

    __version__ = _version("product-id-codec")
except PackageNotFoundError:
    raise ImportError(
        "Failed to determine package version. product-id-codec must be installed "
        "as a package (e.g. `pip install -e .`)."
    )

# Import main components for easier access
from .codec import ParseResult, ProductIdCodec
from .config import CodecConfig, IdFormat, ValidationRules, load_config
from .errors import (
    ConfigFileNotFoundError,
    ConfigurationError,
    IdentifierError,
    InvalidConfigFileError,
    InvalidConfigValueError,
    InvalidCustomIdError,
    InvalidFormatConfigError,
    InvalidSequenceError,
    InvalidTypeCodeError,
    ProductIdError,
)
from .type_registry import DEFAULT_PRODUCT_TYPES, TypeRegistry

# Define public API
__all__ = [
    # Core codec
    "ProductIdCodec",
    "ParseResult",
    # Configuration
    "CodecConfig",
    "IdFormat",
    "ValidationRules",
    "load_config",
    # Type registry
    "TypeRegistry",
    "DEFAULT_PRODUCT_TYPES",
    # Errors
    "ProductIdError",
    "ConfigurationError",
    "ConfigFileNotFoundError",
    "InvalidConfigFileError",
    "InvalidConfigValueError",
    "InvalidFormatConfigError",
    "InvalidTypeCodeError",
    "IdentifierError",
    "InvalidCustomIdError",
    "InvalidSequenceError",
]
