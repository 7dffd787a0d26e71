# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Field checks for the create-person form."""
from typing import List, Optional

FIRST_NAME_MISSING = "First name was not provided."
LAST_NAME_MISSING = "Last name was not provided."
PHONE_MISSING = "Phone number was not provided."
PHONE_INVALID = "Phone number was not in a valid format."

# DDD-DDD-DDDD
PHONE_SEGMENT_LENGTHS = (3, 3, 4)


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def is_valid_phone(phone: str) -> bool:
    parts = phone.split("-")
    if len(parts) != len(PHONE_SEGMENT_LENGTHS):
        return False
    for part, length in zip(parts, PHONE_SEGMENT_LENGTHS):
        # isascii() rules out non-latin digits that isdigit() accepts
        if len(part) != length or not (part.isascii() and part.isdigit()):
            return False
    return True


def validate_person_fields(first_name: Optional[str], last_name: Optional[str],
                           phone: Optional[str]) -> List[str]:
    """Return every violation found; an empty list means the input is valid.

    The format check only runs on a non-blank phone, so a missing number is
    reported once.
    """
    errors: List[str] = []
    if is_blank(first_name):
        errors.append(FIRST_NAME_MISSING)
    if is_blank(last_name):
        errors.append(LAST_NAME_MISSING)
    if is_blank(phone):
        errors.append(PHONE_MISSING)
    elif not is_valid_phone(phone):
        errors.append(PHONE_INVALID)
    return errors
