# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Repository package: re-exports PersonRepository."""
from phonebook.repositories.person_repository import PersonRepository

__all__ = ["PersonRepository"]
