"""Input validation utilities."""
import re
import bleach


class ValidationError(Exception):
    """Raised when input validation fails."""
    pass


class Validator:
    """Input validation utilities shared by the API and the table editors."""

    INTEGER_PATTERN = re.compile(r'^[+-]?\d+$')

    @staticmethod
    def validate_required(value, field_name):
        """Validate that a required field is not empty."""
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError(f"{field_name} is required")
        return value

    @staticmethod
    def validate_string_length(value, field_name, min_length=0, max_length=None):
        """Validate string length constraints."""
        if not isinstance(value, str):
            raise ValidationError(f"{field_name} must be a string")

        if len(value) < min_length:
            raise ValidationError(f"{field_name} must be at least {min_length} characters")

        if max_length and len(value) > max_length:
            raise ValidationError(f"{field_name} must be no more than {max_length} characters")

        return value.strip()

    @staticmethod
    def validate_number(value, field_name, allow_float=False, min_val=None, max_val=None):
        """Coerce a numeric input value and validate its range.

        Strings coming from text editors are stripped before conversion.
        Empty strings and None are returned as None so that optional numeric
        fields can be cleared.

        Args:
            value: Raw value (str, int, float or None)
            field_name: Name used in error messages
            allow_float: Accept fractional values (returns float)
            min_val: Optional inclusive lower bound
            max_val: Optional inclusive upper bound

        Returns:
            int, float or None

        Raises:
            ValidationError: If the value is not a number or out of range
        """
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        if isinstance(value, bool):
            raise ValidationError(f"{field_name} must be a valid number")

        if isinstance(value, str):
            text = value.strip()
            try:
                if allow_float:
                    number = float(text)
                elif Validator.INTEGER_PATTERN.match(text):
                    number = int(text)
                else:
                    raise ValueError(text)
            except ValueError:
                kind = "number" if allow_float else "whole number"
                raise ValidationError(f"{field_name} must be a valid {kind}")
        elif isinstance(value, (int, float)):
            if not allow_float and isinstance(value, float):
                if not value.is_integer():
                    raise ValidationError(f"{field_name} must be a valid whole number")
                value = int(value)
            number = value
        else:
            raise ValidationError(f"{field_name} must be a valid number")

        if min_val is not None and number < min_val:
            raise ValidationError(f"{field_name} must be at least {min_val}")
        if max_val is not None and number > max_val:
            raise ValidationError(f"{field_name} must be no more than {max_val}")
        return number

    @staticmethod
    def validate_choice(value, field_name, valid_choices):
        """Validate that value is in list of valid choices."""
        if value not in valid_choices:
            raise ValidationError(f"{field_name} must be one of: {', '.join(str(c) for c in valid_choices)}")
        return value

    @staticmethod
    def sanitize_html(text):
        """Secure HTML sanitization using bleach library.

        Plain text (no tags or entities) is returned unchanged without
        going through the HTML parser.
        """
        if not text:
            return text

        if '<' not in text and '>' not in text and '&' not in text:
            return text

        allowed_tags = ['p', 'br', 'strong', 'em', 'u', 'ul', 'ol', 'li', 'blockquote']
        allowed_attributes = {}

        return bleach.clean(text, tags=allowed_tags, attributes=allowed_attributes, strip=True)
