# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Data-access layer for people and their phone numbers."""
from typing import List

from sqlalchemy import func, select, text
from sqlalchemy.exc import IntegrityError, MultipleResultsFound, NoResultFound
from sqlalchemy.orm import joinedload, sessionmaker

from phonebook.core.exceptions import (
    AmbiguousPersonError, PersonHasPhoneNumbersError, PersonNotFoundError,
)
from phonebook.core.logging import get_logger
from phonebook.models import Base, Person, PhoneNumber
from phonebook.models.seed import build_seed_people

logger = get_logger(__name__)

# Person.ID is a 32-bit INTEGER; larger values cannot match a row
ID_MIN, ID_MAX = -(2 ** 31), 2 ** 31 - 1


def _check_id(person_id: int) -> None:
    if not ID_MIN <= person_id <= ID_MAX:
        raise PersonNotFoundError(person_id)


class PersonRepository:
    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    # ── Write ──────────────────────────────────────────────────────────

    def create_person(self, first_name: str, last_name: str, number: str) -> Person:
        person = Person(first_name=first_name, last_name=last_name)
        # PersonID is filled in from the relationship at flush time
        phone = PhoneNumber(number=number, person=person)
        with self._session_factory() as session:
            with session.begin():
                session.add_all([person, phone])
        return person

    def delete_person(self, person_id: int) -> None:
        _check_id(person_id)
        with self._session_factory() as session:
            try:
                with session.begin():
                    person = session.execute(
                        select(Person).where(Person.id == person_id)
                    ).scalar_one()
                    dependents = session.execute(
                        select(func.count())
                        .select_from(PhoneNumber)
                        .where(PhoneNumber.person_id == person_id)
                    ).scalar_one()
                    if dependents:
                        raise PersonHasPhoneNumbersError(person_id, dependents)
                    session.delete(person)
            except NoResultFound:
                raise PersonNotFoundError(person_id) from None
            except MultipleResultsFound:
                raise AmbiguousPersonError(person_id) from None
            except IntegrityError as exc:
                # A phone number was added between the count and the flush
                raise PersonHasPhoneNumbersError(person_id) from exc

    # ── Read ───────────────────────────────────────────────────────────

    def list_people(self) -> List[Person]:
        with self._session_factory() as session:
            return list(session.execute(select(Person)).scalars().all())

    def get_person(self, person_id: int) -> Person:
        _check_id(person_id)
        stmt = (
            select(Person)
            .options(joinedload(Person.phone_numbers))
            .where(Person.id == person_id)
        )
        with self._session_factory() as session:
            try:
                return session.execute(stmt).unique().scalar_one()
            except NoResultFound:
                raise PersonNotFoundError(person_id) from None
            except MultipleResultsFound:
                raise AmbiguousPersonError(person_id) from None

    def count_people(self) -> int:
        with self._session_factory() as session:
            return session.execute(select(func.count()).select_from(Person)).scalar_one()

    # ── Schema / lifecycle ─────────────────────────────────────────────

    def create_schema(self) -> None:
        with self._session_factory() as session:
            Base.metadata.create_all(bind=session.get_bind())

    def seed_if_empty(self) -> int:
        with self._session_factory() as session:
            with session.begin():
                if session.execute(select(func.count()).select_from(Person)).scalar_one():
                    return 0
                people = build_seed_people()
                session.add_all(people)
        logger.info("Seeded directory with %d people", len(people))
        return len(people)

    def verify_connection(self) -> None:
        with self._session_factory() as session:
            session.execute(text("SELECT 1"))

    def dispose(self):
        with self._session_factory() as session:
            session.get_bind().dispose()
