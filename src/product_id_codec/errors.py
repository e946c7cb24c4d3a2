"""Error types for the product identifier codec.

This module defines the error types raised by the codec for configuration
problems and for identifiers that cannot be minted.

Plain validation failures are *not* errors: ``validate`` returns a boolean and
``parse`` returns a tagged result.
"""

from typing import Any, Iterable, List, Optional


class ProductIdError(Exception):
    """Base class for all codec-related errors.

    This is the parent class for all codec-specific exceptions.
    """

    pass


class ConfigurationError(ProductIdError):
    """Base class for configuration-related errors.

    This is raised for errors related to configuration loading, parsing,
    or validation.
    """

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        """Initialize configuration error.

        Args:
            message: Error message
            path: Optional path to the configuration file that caused the error
        """
        super().__init__(message)
        self.message = message
        self.path = path


class ConfigFileNotFoundError(ConfigurationError):
    """Raised when an explicitly requested configuration file is not found.

    Examples:
        >>> try:
        ...     ProductIdCodec.from_config_file("/missing/codec.yml")
        ... except ConfigFileNotFoundError as e:
        ...     print(f"Config file not found: {e.path}")
    """

    pass


class InvalidConfigFileError(ConfigurationError):
    """Raised when a configuration file cannot be parsed or has the wrong shape."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        expected_type: str = "dict",
    ) -> None:
        """Initialize invalid config file error.

        Args:
            message: Error message
            path: Optional path to the configuration file
            expected_type: Expected type of the configuration document
        """
        super().__init__(message, path)
        self.expected_type = expected_type


class InvalidConfigValueError(ConfigurationError):
    """Raised when a configuration field has a structurally invalid value.

    Examples:
        >>> try:
        ...     codec.update_config(length=0)
        ... except InvalidConfigValueError as e:
        ...     print(f"{e.field} rejected: {e.value!r}")
    """

    def __init__(
        self,
        message: str,
        field: str,
        value: Any,
        path: Optional[str] = None,
    ) -> None:
        """Initialize invalid config value error.

        Args:
            message: Error message
            field: Name of the offending configuration field
            value: The rejected value
            path: Optional path to the configuration file
        """
        super().__init__(message, path)
        self.field = field
        self.value = value


class InvalidFormatConfigError(ConfigurationError):
    """Raised when the configured identifier format is not recognized.

    The codec never falls back to another scheme for an unknown format.

    Examples:
        >>> try:
        ...     codec.update_config(format="base32")
        ... except InvalidFormatConfigError as e:
        ...     print(f"Use one of: {', '.join(e.allowed_formats)}")
    """

    def __init__(
        self,
        message: str,
        format: Any,
        allowed_formats: Optional[Iterable[str]] = None,
        path: Optional[str] = None,
    ) -> None:
        """Initialize invalid format error.

        Args:
            message: Error message
            format: The unrecognized format value
            allowed_formats: Format names the codec understands
            path: Optional path to the configuration file
        """
        super().__init__(message, path)
        self.format = format
        self.allowed_formats: List[str] = list(allowed_formats or [])


class InvalidTypeCodeError(ConfigurationError):
    """Raised when a category override maps to something other than a two-character code."""

    def __init__(self, message: str, category: str, code: Any) -> None:
        """Initialize invalid type code error.

        Args:
            message: Error message
            category: The category whose code was rejected
            code: The rejected code
        """
        super().__init__(message)
        self.category = category
        self.code = code


class IdentifierError(ProductIdError):
    """Base class for errors raised while minting an identifier."""

    pass


class InvalidCustomIdError(IdentifierError):
    """Raised when a caller-supplied custom identifier fails validation.

    Examples:
        >>> try:
        ...     codec.generate(custom_id="not valid!")
        ... except InvalidCustomIdError as e:
        ...     print(f"Rejected: {e.custom_id}")
    """

    def __init__(self, message: str, custom_id: str) -> None:
        """Initialize invalid custom id error.

        Args:
            message: Error message
            custom_id: The rejected identifier
        """
        super().__init__(message)
        self.message = message
        self.custom_id = custom_id


class InvalidSequenceError(IdentifierError):
    """Raised when a sequence is not a non-negative integer."""

    def __init__(self, message: str, sequence: Any) -> None:
        """Initialize invalid sequence error.

        Args:
            message: Error message
            sequence: The rejected sequence value
        """
        super().__init__(message)
        self.message = message
        self.sequence = sequence
