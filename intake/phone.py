"""Kyrgyz phone number mask: +996 (7XX) XXX-XXX."""

import re

COUNTRY_CODE = "996"
MAX_DIGITS = 12
MAX_LENGTH = len("+996 (700) 123-456")


def digits_only(value: str) -> str:
    return re.sub(r"\D", "", value)


def normalize_phone(value: str) -> str:
    """Reformat raw keystrokes into the national display form.

    Punctuation is revealed progressively as digits arrive, so a partial
    number renders as a partial mask. A local trunk "0" is replaced by the
    country code. Never raises; an input with no digits yields "".
    """
    digits = digits_only(value)
    if not digits:
        return ""
    if digits.startswith("0"):
        digits = COUNTRY_CODE + digits[1:]
    if not digits.startswith(COUNTRY_CODE):
        digits = COUNTRY_CODE + digits
    digits = digits[:MAX_DIGITS]

    out = "+" + COUNTRY_CODE
    if len(digits) > 3:
        out += " (" + digits[3:6]
    if len(digits) > 6:
        out += ") " + digits[6:9]
    if len(digits) > 9:
        out += "-" + digits[9:12]
    return out


def is_complete(value: str) -> bool:
    return len(digits_only(value)) >= MAX_DIGITS
