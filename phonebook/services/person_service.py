# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Business logic for the person directory."""
from typing import List, Optional

from phonebook.core.exceptions import PersonHasPhoneNumbersError
from phonebook.core.logging import get_logger
from phonebook.metrics import (
    FORM_VALIDATION_FAILURES, PEOPLE_CREATED, PEOPLE_DELETED, PEOPLE_TOTAL,
    PERSON_DELETE_REJECTED,
)
from phonebook.models import Person
from phonebook.repositories.person_repository import PersonRepository
from phonebook.schemas import PersonDetail, PersonForm
from phonebook.services import validation

logger = get_logger(__name__)

SUCCESS_MESSAGE = "Successfully added the person to the list."

_ERROR_FIELDS = {
    validation.FIRST_NAME_MISSING: "first_name",
    validation.LAST_NAME_MISSING: "last_name",
    validation.PHONE_MISSING: "phone",
    validation.PHONE_INVALID: "phone",
}


class PersonService:
    def __init__(self, repo: PersonRepository):
        self._repo = repo

    def seed_gauges(self):
        PEOPLE_TOTAL.set(self._repo.count_people())
        logger.info("Prometheus gauges loaded from DB")

    def create_person(self, first_name: Optional[str], last_name: Optional[str],
                      phone: Optional[str], submitted: bool = True) -> PersonForm:
        """Validate the form and, when it is clean, store the person with one phone number.

        ``submitted`` is False for a bare page load with no parameters: the
        form comes back empty in the ``initial`` state and nothing is checked.
        """
        if not submitted:
            return PersonForm(state="initial")

        errors = validation.validate_person_fields(first_name, last_name, phone)
        if errors:
            for message in errors:
                FORM_VALIDATION_FAILURES.labels(field=_ERROR_FIELDS[message]).inc()
            logger.info("Person form rejected errors=%d", len(errors))
            return PersonForm(
                state="error", errors=errors,
                first_name=first_name, last_name=last_name, phone=phone,
            )

        person = self._repo.create_person(first_name.strip(), last_name.strip(), phone)
        PEOPLE_CREATED.inc()
        PEOPLE_TOTAL.inc()
        logger.info("Person created id=%s phone_numbers=%d",
                    person.id, len(person.phone_numbers))
        return PersonForm(
            state="success", message=SUCCESS_MESSAGE,
            person=PersonDetail.model_validate(person),
        )

    def list_people(self) -> List[Person]:
        return self._repo.list_people()

    def get_person(self, person_id: int) -> Person:
        return self._repo.get_person(person_id)

    def delete_person(self, person_id: int) -> None:
        try:
            self._repo.delete_person(person_id)
        except PersonHasPhoneNumbersError:
            PERSON_DELETE_REJECTED.inc()
            logger.warning("Delete refused id=%s: phone numbers still reference it", person_id)
            raise
        PEOPLE_DELETED.inc()
        PEOPLE_TOTAL.dec()
        logger.info("Person deleted id=%s", person_id)
