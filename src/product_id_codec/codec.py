"""Core codec for generating, validating and parsing product identifiers.

This module provides the ProductIdCodec class, the single entry point used by
storefront collaborators. Typical usage:

    from product_id_codec import ProductIdCodec

    codec = ProductIdCodec(format="custom", prefix="SKU", separator="-")
    product_id = codec.generate(type="electronics", sequence=456)  # "SKU-EL000456"
    codec.parse(product_id).type                                    # "electronics"

A codec owns its configuration and type registry. There is no shared default
instance: construct one and hand it to the components that need it.

Identifiers carry no tag recording the configuration that minted them. Callers
that reconfigure a codec must track which configuration produced which ids.
"""

import math
import threading
import time
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, Mapping, NamedTuple, Optional, Union

from .config import DEFAULT_CONFIG, CodecConfig, IdFormat, load_config
from .config_paths import get_codec_config_path
from .errors import ConfigurationError, InvalidCustomIdError, InvalidFormatConfigError, InvalidSequenceError
from .logging import LogEvent, log_debug, log_info, log_warning
from .type_registry import OTHER_CATEGORY, TYPE_CODE_LENGTH, TypeRegistry

ALPHANUMERIC_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"

# Linear-congruential generator constants for the alphanumeric scheme.
# Changing them changes every alphanumeric identifier ever minted.
LCG_MULTIPLIER = 9301
LCG_INCREMENT = 49297
LCG_MODULUS = 233280

INVALID_ID_MESSAGE = "invalid identifier format"


@dataclass(frozen=True)
class ParseResult:
    """Outcome of :meth:`ProductIdCodec.parse`.

    Attributes:
        valid: Whether the identifier matched the active configuration
        base_id: Identifier body with prefix, separator and suffix removed
        type: Product category (``"other"`` outside the custom format)
        sequence: Recovered sequence number. Exact for the custom format,
            best-effort digit extraction otherwise, None when a custom body
            holds non-digit characters
        type_code: Two-character type code (custom format only)
        numeric_part: Body after the type code (custom format only)
        error: Human-readable reason when ``valid`` is False
    """

    valid: bool
    base_id: Optional[str] = None
    type: Optional[str] = None
    sequence: Optional[int] = None
    type_code: Optional[str] = None
    numeric_part: Optional[str] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the populated fields as a plain dict."""
        return {key: value for key, value in asdict(self).items() if value is not None}


class _CodecState(NamedTuple):
    config: CodecConfig
    registry: TypeRegistry


def encode_numeric(sequence: int, length: int) -> str:
    """Left-pad ``sequence`` with zeros to ``length``; longer values are kept whole."""
    return str(sequence).rjust(length, "0")


def encode_alphanumeric(sequence: int, length: int) -> str:
    """Derive ``length`` characters of ``A-Z0-9`` from ``sequence``.

    Deterministic: the same sequence and length always give the same string.
    The character index is computed in floating point exactly as
    ``floor(seed / modulus * 36)`` so results match other implementations of
    the same generator. Not a source of randomness.
    """
    seed = sequence
    chars = []
    for _ in range(length):
        seed = (seed * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        index = math.floor(seed / LCG_MODULUS * len(ALPHANUMERIC_CHARS))
        chars.append(ALPHANUMERIC_CHARS[index])
    return "".join(chars)


def encode_custom(sequence: int, type_code: str, length: int) -> str:
    """Type code followed by the right-aligned last ``length - 2`` digits of the sequence."""
    width = length - TYPE_CODE_LENGTH
    return type_code + encode_numeric(sequence, width)[-width:]


def _is_ascii_digits(text: str) -> bool:
    return text.isascii() and text.isdigit()


def _is_ascii_alnum(text: str) -> bool:
    return text.isascii() and text.isalnum()


def _is_upper_alnum(text: str) -> bool:
    return _is_ascii_alnum(text) and text == text.upper()


class ProductIdCodec:
    """Generates, validates and parses product identifiers."""

    def __init__(self, config: Optional[Union[CodecConfig, Mapping[str, Any]]] = None, **fields: Any):
        """Initialize a codec.

        Args:
            config: Base configuration, as a ``CodecConfig`` or a mapping of its
                    fields. If None, the defaults are used.
            **fields: Individual configuration fields merged over ``config``

        Raises:
            ConfigurationError: If the resulting configuration is invalid
        """
        if config is None:
            base = DEFAULT_CONFIG
        elif isinstance(config, CodecConfig):
            base = config
        else:
            base = CodecConfig.from_dict(config)
        if fields:
            base = base.merge(fields)

        self._lock = threading.RLock()
        self._state = _CodecState(base, TypeRegistry(base.product_types))

    @classmethod
    def from_config_file(cls, path: Optional[str] = None) -> "ProductIdCodec":
        """Create a codec from a YAML configuration file.

        Args:
            path: Explicit file path. If None, ``PRODUCT_ID_CODEC_CONFIG`` and
                  then the user config directory are consulted; when neither
                  holds a file the defaults are used.

        Raises:
            ConfigurationError: If the file is missing or invalid
        """
        resolved = path or get_codec_config_path()
        if resolved is None:
            log_debug(LogEvent.CONFIG_LOAD, "No codec configuration file found, using defaults")
            return cls()

        result = load_config(resolved)
        if not result.success or result.data is None:
            if isinstance(result.exception, ConfigurationError):
                raise result.exception
            raise ConfigurationError(result.error or "Failed to load configuration", path=result.path)
        return cls(result.data)

    # -- configuration -------------------------------------------------

    @property
    def registry(self) -> TypeRegistry:
        """The type registry built from the active configuration."""
        return self._state.registry

    def get_config(self) -> CodecConfig:
        """Return an immutable snapshot of the active configuration."""
        return self._state.config

    def update_config(self, partial: Optional[Mapping[str, Any]] = None, **fields: Any) -> "ProductIdCodec":
        """Shallow-merge configuration fields into the active configuration.

        The merged configuration is validated before it replaces the current
        one; on error the codec keeps its previous configuration.

        Args:
            partial: Mapping of field names to new values
            **fields: Field values given as keyword arguments

        Returns:
            This codec

        Raises:
            ConfigurationError: If a field is unknown or the result is invalid
        """
        changes: Dict[str, Any] = dict(partial or {})
        changes.update(fields)
        if not changes:
            return self

        with self._lock:
            current = self._state
            try:
                config = current.config.merge(changes)
                registry = current.registry
                if config.product_types != current.config.product_types:
                    registry = TypeRegistry(config.product_types)
            except ConfigurationError as e:
                log_warning(
                    LogEvent.CONFIG_UPDATE,
                    f"Rejected configuration update: {e}",
                    fields=sorted(changes),
                )
                raise
            self._state = _CodecState(config, registry)

        log_info(LogEvent.CONFIG_UPDATE, "Codec configuration updated", fields=sorted(changes))
        return self

    def reset_config(self) -> None:
        """Restore the built-in default configuration."""
        with self._lock:
            self._state = _CodecState(DEFAULT_CONFIG, TypeRegistry())
        log_info(LogEvent.CONFIG_UPDATE, "Codec configuration reset to defaults")

    # -- generation ----------------------------------------------------

    def generate(
        self,
        type: str = OTHER_CATEGORY,
        sequence: Optional[int] = None,
        custom_id: Optional[str] = None,
    ) -> str:
        """Mint a product identifier.

        Args:
            type: Product category; unknown categories use the "other" code
            sequence: Non-negative integer driving the encoding. Defaults to
                      the current time in milliseconds.
            custom_id: Caller-chosen identifier, returned unchanged if custom
                       ids are allowed and it validates

        Returns:
            The identifier string

        Raises:
            InvalidCustomIdError: If ``custom_id`` fails validation
            InvalidSequenceError: If ``sequence`` is not a non-negative integer
            InvalidFormatConfigError: If the configured format is unknown
        """
        state = self._state
        config = state.config

        if config.allow_custom and custom_id:
            if not self._validate(state, custom_id):
                log_warning(LogEvent.ID_GENERATION, "Rejected custom product id", custom_id=custom_id)
                raise InvalidCustomIdError(
                    f"Custom product id {custom_id!r} does not satisfy the active validation rules",
                    custom_id=custom_id,
                )
            return custom_id

        if sequence is None:
            sequence = int(time.time() * 1000)
        if isinstance(sequence, bool) or not isinstance(sequence, int) or sequence < 0:
            raise InvalidSequenceError(
                f"Sequence must be a non-negative integer, got {sequence!r}",
                sequence=sequence,
            )

        body = self._encode(state, type, sequence)
        product_id = self._apply_formatting(config, body)
        log_debug(
            LogEvent.ID_GENERATION,
            "Generated product id",
            product_id=product_id,
            format=config.format.value,
            sequence=sequence,
        )
        return product_id

    def _encode(self, state: _CodecState, type: str, sequence: int) -> str:
        config = state.config
        encoders: Dict[IdFormat, Callable[[], str]] = {
            IdFormat.NUMERIC: lambda: encode_numeric(sequence, config.length),
            IdFormat.ALPHANUMERIC: lambda: encode_alphanumeric(sequence, config.length),
            IdFormat.CUSTOM: lambda: encode_custom(sequence, state.registry.resolve_code(type), config.length),
        }
        encoder = encoders.get(config.format)
        if encoder is None:
            raise InvalidFormatConfigError(
                f"Unknown identifier format {config.format!r}",
                format=config.format,
                allowed_formats=[f.value for f in IdFormat],
            )
        return encoder()

    @staticmethod
    def _leading_literal(config: CodecConfig) -> str:
        if config.prefix and config.separator:
            return config.prefix + config.separator
        return config.prefix

    def _apply_formatting(self, config: CodecConfig, body: str) -> str:
        return self._leading_literal(config) + body + config.suffix

    # -- validation ----------------------------------------------------

    def validate(self, product_id: Any) -> bool:
        """Check whether ``product_id`` conforms to the active configuration.

        Never raises; anything that is not a conforming string is invalid.
        """
        valid = self._validate(self._state, product_id)
        log_debug(LogEvent.ID_VALIDATION, "Validated product id", product_id=product_id, valid=valid)
        return valid

    def _strip(self, config: CodecConfig, product_id: str) -> Optional[str]:
        """Remove the configured literals, or return None if they are absent."""
        lead = self._leading_literal(config)
        suffix = config.suffix
        if len(product_id) < len(lead) + len(suffix):
            return None
        if not product_id.startswith(lead) or not product_id.endswith(suffix):
            return None
        return product_id[len(lead) : len(product_id) - len(suffix)]

    def _validate(self, state: _CodecState, product_id: Any) -> bool:
        config = state.config
        rules = config.validation

        if not isinstance(product_id, str):
            return False
        if rules.required and not product_id.strip():
            return False
        if not rules.min_length <= len(product_id) <= rules.max_length:
            return False

        body = self._strip(config, product_id)
        if not body:
            return False

        if config.format is IdFormat.NUMERIC:
            return _is_ascii_digits(body)
        if config.format is IdFormat.ALPHANUMERIC:
            return _is_ascii_alnum(body)
        if config.format is IdFormat.CUSTOM:
            return self._validate_custom_body(state, body)
        return False

    @staticmethod
    def _validate_custom_body(state: _CodecState, body: str) -> bool:
        type_code, rest = body[:TYPE_CODE_LENGTH], body[TYPE_CODE_LENGTH:]
        if not state.registry.is_known_code(type_code):
            return False
        return len(rest) == state.config.length - TYPE_CODE_LENGTH and _is_upper_alnum(rest)

    # -- parsing -------------------------------------------------------

    def parse(self, product_id: Any) -> ParseResult:
        """Decompose an identifier into its type and sequence.

        For the custom format the result is exact. For the numeric and
        alphanumeric formats ``sequence`` is just the digits found in the body
        (0 if there are none): numeric ids round-trip this way, alphanumeric
        ids cannot be inverted and any digits in them are incidental.

        Never raises; invalid input yields ``ParseResult(valid=False)``.
        """
        state = self._state
        config = state.config

        if not self._validate(state, product_id):
            log_debug(LogEvent.ID_PARSE, "Could not parse product id", product_id=product_id)
            return ParseResult(valid=False, error=INVALID_ID_MESSAGE)

        body = self._strip(config, product_id)
        if body is None:
            return ParseResult(valid=False, error=INVALID_ID_MESSAGE)

        if config.format is IdFormat.CUSTOM:
            type_code, numeric_part = body[:TYPE_CODE_LENGTH], body[TYPE_CODE_LENGTH:]
            return ParseResult(
                valid=True,
                base_id=body,
                type=state.registry.resolve_category(type_code),
                sequence=int(numeric_part) if _is_ascii_digits(numeric_part) else None,
                type_code=type_code,
                numeric_part=numeric_part,
            )

        digits = "".join(ch for ch in body if ch.isascii() and ch.isdigit())
        return ParseResult(
            valid=True,
            base_id=body,
            type=OTHER_CATEGORY,
            sequence=int(digits) if digits else 0,
        )
