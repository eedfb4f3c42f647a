"""
Helpers for normalising user-entered phone numbers to E.164.
"""
import re

import phonenumbers


def normalize_local_digits(s: str) -> str:
    return re.sub(r"\D", "", s or "")


def to_e164(phone_raw: str, default_region: str = "IN") -> str:
    """
    Accepts either local/national digits or already-E.164.
    Returns a strict E.164 string like '+919876543210' or raises ValueError.
    """
    if not phone_raw or not phone_raw.strip():
        raise ValueError("empty phone")

    phone_raw = phone_raw.strip()
    try:
        if phone_raw.startswith("+"):
            num = phonenumbers.parse(phone_raw, None)
        else:
            num = phonenumbers.parse(normalize_local_digits(phone_raw), default_region)
    except phonenumbers.NumberParseException as e:
        raise ValueError(f"unparseable phone: {e}") from e

    if not phonenumbers.is_possible_number(num) or not phonenumbers.is_valid_number(num):
        raise ValueError("invalid phone number")
    return phonenumbers.format_number(num, phonenumbers.PhoneNumberFormat.E164)
