"""Tests for error classes."""

from product_id_codec.errors import (
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


class TestErrorClasses:
    """Tests for all error classes."""

    def test_product_id_error(self) -> None:
        """Test ProductIdError base class."""
        error = ProductIdError("Base error message")
        assert str(error) == "Base error message"

    def test_configuration_error(self) -> None:
        error = ConfigurationError("Bad config", path="/etc/codec.yml")
        assert error.message == "Bad config"
        assert error.path == "/etc/codec.yml"
        assert isinstance(error, ProductIdError)

        assert ConfigurationError("Bad config").path is None

    def test_config_file_errors(self) -> None:
        assert isinstance(ConfigFileNotFoundError("missing", path="x.yml"), ConfigurationError)

        error = InvalidConfigFileError("not a mapping", path="x.yml", expected_type="dict")
        assert error.expected_type == "dict"
        assert isinstance(error, ConfigurationError)

    def test_invalid_config_value_error(self) -> None:
        error = InvalidConfigValueError("length must be positive", field="length", value=0)
        assert error.field == "length"
        assert error.value == 0
        assert str(error) == "length must be positive"
        assert isinstance(error, ConfigurationError)

    def test_invalid_format_config_error(self) -> None:
        error = InvalidFormatConfigError(
            "Unknown format",
            format="base32",
            allowed_formats=("numeric", "custom"),
        )
        assert error.format == "base32"
        assert error.allowed_formats == ["numeric", "custom"]
        assert isinstance(error, ConfigurationError)

        assert InvalidFormatConfigError("Unknown format", format="x").allowed_formats == []

    def test_invalid_type_code_error(self) -> None:
        error = InvalidTypeCodeError("bad code", category="garden", code="GDN")
        assert error.category == "garden"
        assert error.code == "GDN"
        assert isinstance(error, ConfigurationError)

    def test_identifier_errors(self) -> None:
        custom = InvalidCustomIdError("rejected", custom_id="??")
        assert custom.custom_id == "??"
        assert custom.message == "rejected"
        assert isinstance(custom, IdentifierError)

        sequence = InvalidSequenceError("negative", sequence=-1)
        assert sequence.sequence == -1
        assert isinstance(sequence, IdentifierError)
        assert isinstance(sequence, ProductIdError)
        assert not isinstance(sequence, ConfigurationError)
