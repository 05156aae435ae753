"""Tests for shared validation utilities."""
import pytest
from shared.validation import Validator, ValidationError


class TestValidator:
    """Test validation utilities."""

    def test_validate_required_success(self):
        """Test successful required field validation."""
        assert Validator.validate_required("test", "test_field") == "test"
        assert Validator.validate_required(123, "test_field") == 123

    def test_validate_required_failure(self):
        """Test required field validation failures."""
        for value in ("", None, "   "):
            with pytest.raises(ValidationError, match="test_field is required"):
                Validator.validate_required(value, "test_field")

    def test_validate_string_length(self):
        assert Validator.validate_string_length("  test  ", "field", 1, 10) == "test"
        with pytest.raises(ValidationError, match="field must be at least 5 characters"):
            Validator.validate_string_length("test", "field", 5, 10)
        with pytest.raises(ValidationError, match="field must be no more than 3 characters"):
            Validator.validate_string_length("testing", "field", 1, 3)

    def test_validate_choice(self):
        assert Validator.validate_choice("Wall", "Mounting", ["Ceiling", "Wall"]) == "Wall"
        with pytest.raises(ValidationError, match="Mounting must be one of: Ceiling, Wall"):
            Validator.validate_choice("Floor", "Mounting", ["Ceiling", "Wall"])


class TestValidateNumber:
    """Test numeric coercion used by number editors."""

    def test_integer_strings(self):
        assert Validator.validate_number("12", "Floors") == 12
        assert Validator.validate_number(" -3 ", "Floors") == -3

    def test_blank_is_none(self):
        assert Validator.validate_number("", "Floors") is None
        assert Validator.validate_number("  ", "Floors") is None
        assert Validator.validate_number(None, "Floors") is None

    def test_integral_float_becomes_int(self):
        value = Validator.validate_number(4.0, "Floors")
        assert value == 4
        assert isinstance(value, int)

    def test_rejects_fraction_without_allow_float(self):
        with pytest.raises(ValidationError, match="Floors must be a valid whole number"):
            Validator.validate_number("2.5", "Floors")
        with pytest.raises(ValidationError, match="whole number"):
            Validator.validate_number(2.5, "Floors")

    def test_allow_float(self):
        assert Validator.validate_number("2.5", "Height", allow_float=True) == 2.5

    def test_rejects_text_and_bool(self):
        with pytest.raises(ValidationError, match="Floors must be a valid whole number"):
            Validator.validate_number("twelve", "Floors")
        with pytest.raises(ValidationError, match="Floors must be a valid number"):
            Validator.validate_number(True, "Floors")
        with pytest.raises(ValidationError, match="Height must be a valid number"):
            Validator.validate_number("abc", "Height", allow_float=True)

    def test_range(self):
        assert Validator.validate_number("0", "Floors", min_val=0) == 0
        with pytest.raises(ValidationError, match="Floors must be at least 0"):
            Validator.validate_number("-1", "Floors", min_val=0)
        with pytest.raises(ValidationError, match="Floors must be no more than 200"):
            Validator.validate_number(201, "Floors", max_val=200)


class TestSanitizeHtml:

    def test_plain_text_unchanged(self):
        assert Validator.sanitize_html("Door 3 - east side") == "Door 3 - east side"
        assert Validator.sanitize_html("") == ""
        assert Validator.sanitize_html(None) is None

    def test_strips_disallowed_tags(self):
        cleaned = Validator.sanitize_html('<script>alert(1)</script><strong>Lobby</strong>')
        assert '<script>' not in cleaned
        assert '<strong>Lobby</strong>' in cleaned

    def test_strips_attributes(self):
        cleaned = Validator.sanitize_html('<p onclick="x()">hi</p>')
        assert cleaned == '<p>hi</p>'
