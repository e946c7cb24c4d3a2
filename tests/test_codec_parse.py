"""Tests for identifier parsing."""

import pytest

from product_id_codec import ParseResult, ProductIdCodec
from product_id_codec.codec import INVALID_ID_MESSAGE


def test_custom_round_trip() -> None:
    """Custom ids recover their category and sequence."""
    codec = ProductIdCodec(format="custom")
    result = codec.parse(codec.generate(type="electronics", sequence=456))

    assert result == ParseResult(
        valid=True,
        base_id="EL000456",
        type="electronics",
        sequence=456,
        type_code="EL",
        numeric_part="000456",
    )


def test_custom_round_trip_with_literals() -> None:
    codec = ProductIdCodec(format="custom", length=10, prefix="SKU", separator="-", suffix="/A")
    product_id = codec.generate(type="toys", sequence=98765)
    assert product_id == "SKU-TY00098765/A"

    result = codec.parse(product_id)
    assert result.valid is True
    assert result.base_id == "TY00098765"
    assert result.type == "toys"
    assert result.sequence == 98765


def test_custom_unknown_category_parses_as_other() -> None:
    """The OT code maps back to "other"."""
    codec = ProductIdCodec(format="custom")
    result = codec.parse(codec.generate(type="spaceships", sequence=3))
    assert result.type_code == "OT"
    assert result.type == "other"
    assert result.sequence == 3


def test_custom_with_letters_has_no_sequence() -> None:
    """A caller-chosen custom id may hold letters after the type code."""
    codec = ProductIdCodec(format="custom")
    result = codec.parse("ELAB12CD")
    assert result.valid is True
    assert result.type == "electronics"
    assert result.numeric_part == "AB12CD"
    assert result.sequence is None


def test_custom_override_code() -> None:
    codec = ProductIdCodec(format="custom", product_types={"garden": "GD"})
    assert codec.parse("GD000077").type == "garden"


def test_numeric_round_trip() -> None:
    """Numeric ids give back their sequence."""
    codec = ProductIdCodec()
    result = codec.parse(codec.generate(sequence=42))
    assert result.valid is True
    assert result.base_id == "00000042"
    assert result.type == "other"
    assert result.sequence == 42
    assert result.type_code is None


def test_numeric_with_digit_literals() -> None:
    """Digits inside the prefix are not part of the sequence."""
    codec = ProductIdCodec(prefix="77", separator="-")
    result = codec.parse(codec.generate(sequence=305))
    assert result.base_id == "00000305"
    assert result.sequence == 305


def test_alphanumeric_is_best_effort() -> None:
    """Only the incidental digits of an alphanumeric body are extracted."""
    codec = ProductIdCodec(format="alphanumeric")
    product_id = codec.generate(sequence=123)
    assert product_id == "ESOGH4Q5"

    result = codec.parse(product_id)
    assert result.valid is True
    assert result.type == "other"
    assert result.sequence == 45  # not 123: the scheme cannot be inverted


def test_alphanumeric_without_digits() -> None:
    codec = ProductIdCodec(format="alphanumeric")
    assert codec.parse("ABCDEFGH").sequence == 0


@pytest.mark.parametrize("value", ["", "ABC", "ZZ000001", None, 42])
def test_invalid_ids_return_failure(value: object) -> None:
    """Invalid input produces a failed result instead of raising."""
    codec = ProductIdCodec(format="custom")
    result = codec.parse(value)
    assert result.valid is False
    assert result.error == INVALID_ID_MESSAGE
    assert result.to_dict() == {"valid": False, "error": "invalid identifier format"}


def test_to_dict_drops_empty_fields() -> None:
    result = ProductIdCodec().parse("00000042")
    assert result.to_dict() == {"valid": True, "base_id": "00000042", "type": "other", "sequence": 42}


def test_missing_literals_fail_without_raising() -> None:
    codec = ProductIdCodec(prefix="SKU", separator="-")
    assert codec.parse("SKU-00000042").sequence == 42
    for value in ("SKU00000042", "00000042", "SKU-"):
        result = codec.parse(value)
        assert result.valid is False
        assert result.error == INVALID_ID_MESSAGE
