"""Unit tests for principal value objects."""

import pytest

from techcare_identity.domain.principal import (
    Email,
    InvalidEmailError,
    InvalidPhoneNumberError,
    PhoneNumber,
)


class TestEmail:
    def test_normalized_to_lowercase(self):
        assert Email("  Alice@Example.COM ").value == "alice@example.com"

    def test_equal_after_normalization(self):
        assert Email("A@X.com") == Email("a@x.com")

    @pytest.mark.parametrize("value", ["", "not-an-email", "a@b", "@x.com"])
    def test_invalid_rejected(self, value):
        with pytest.raises(InvalidEmailError):
            Email(value)


class TestPhoneNumber:
    @pytest.mark.parametrize("value", ["+250781234567", "0781234567"])
    def test_rwandan_formats_accepted(self, value):
        assert PhoneNumber(value).value == value

    def test_whitespace_stripped(self):
        assert PhoneNumber("+250 781 234 567").value == "+250781234567"

    @pytest.mark.parametrize(
        "value",
        ["781234567", "+254781234567", "07812345678", "+250-781234567", ""],
    )
    def test_other_formats_rejected(self, value):
        with pytest.raises(InvalidPhoneNumberError, match="Rwandan"):
            PhoneNumber(value)
