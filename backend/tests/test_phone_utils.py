import pytest

from sharecare.utils.phone_utils import normalize_local_digits, to_e164


def test_national_number_uses_default_region():
    assert to_e164("9876543210") == "+919876543210"


def test_national_number_with_separators():
    assert to_e164("98765 43210") == "+919876543210"
    assert to_e164("98765-43210") == "+919876543210"


def test_e164_passthrough():
    assert to_e164("+919876543210") == "+919876543210"
    assert to_e164(" +44 7911 123456 ") == "+447911123456"


def test_other_default_region():
    assert to_e164("07911 123456", default_region="GB") == "+447911123456"


@pytest.mark.parametrize("raw", ["", "   ", "12345", "+0000", "not a phone"])
def test_invalid_numbers_raise(raw):
    with pytest.raises(ValueError):
        to_e164(raw)


def test_normalize_local_digits():
    assert normalize_local_digits("(987) 654-3210") == "9876543210"
    assert normalize_local_digits(None) == ""
