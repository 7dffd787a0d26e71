# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Initial directory contents, inserted once into an empty database."""
from typing import List, Tuple

from phonebook.models.directory import Person, PhoneNumber

SEED_PEOPLE: List[Tuple[str, str, Tuple[str, ...]]] = [
    ("John", "Doe", ("800-234-4567",)),
    ("Jane", "Doe", ("800-234-4567", "800-345-5678")),
    ("Todd", "Smith", ("800-456-6789",)),
    ("Sue", "Smith", ("800-987-7654",)),
    ("Joe", "Smithserson", ("800-876-6543", "800-765-5432")),
]


def build_seed_people() -> List[Person]:
    return [
        Person(
            first_name=first,
            last_name=last,
            phone_numbers=[PhoneNumber(number=n) for n in numbers],
        )
        for first, last, numbers in SEED_PEOPLE
    ]
