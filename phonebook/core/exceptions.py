# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Domain errors raised by the data-access layer."""
from typing import Optional


class PersonNotFoundError(KeyError):
    def __init__(self, person_id: int):
        super().__init__(person_id)
        self.person_id = person_id

    def __str__(self) -> str:
        return f"Person {self.person_id} not found"


class AmbiguousPersonError(LookupError):
    def __init__(self, person_id: int):
        super().__init__(f"More than one person matches id {person_id}")
        self.person_id = person_id


class PersonHasPhoneNumbersError(ValueError):
    """Delete rejected: phone numbers still reference the person."""

    def __init__(self, person_id: int, phone_count: Optional[int] = None):
        detail = "dependent phone numbers exist"
        if phone_count:
            detail = f"{detail} ({phone_count})"
        super().__init__(f"Cannot delete person {person_id}: {detail}")
        self.person_id = person_id
        self.phone_count = phone_count
