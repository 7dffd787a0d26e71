# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""FastAPI dependency injection wiring."""
from phonebook.core.database import SessionLocal
from phonebook.repositories.person_repository import PersonRepository
from phonebook.services.person_service import PersonService

_repo = PersonRepository(SessionLocal)
_service = PersonService(_repo)


def get_person_repo() -> PersonRepository:
    return _repo


def get_person_service() -> PersonService:
    return _service
