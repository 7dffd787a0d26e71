# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""ORM models package: re-exports the mapped classes."""
from phonebook.models.directory import Base, Person, PhoneNumber

__all__ = ["Base", "Person", "PhoneNumber"]
