# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: create, list, and detail/delete actions for people."""
from typing import Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import JSONResponse, RedirectResponse

from phonebook.core.config import LIST_PATH
from phonebook.core.exceptions import (
    AmbiguousPersonError, PersonHasPhoneNumbersError, PersonNotFoundError,
)
from phonebook.schemas import PeopleList, PersonDetail, PersonForm, PersonOut
from phonebook.services.person_service import PersonService
from phonebook.core.dependencies import get_person_service

router = APIRouter(prefix="/person", tags=["People"])

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def _parse_id(person_id: str) -> int:
    try:
        return int(person_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid person ID format")


async def _form_fields(request: Request) -> Dict[str, str]:
    """Text fields of a form-encoded POST body; empty for anything else."""
    content_type = request.headers.get("content-type", "").lower()
    if request.method != "POST" or not content_type.startswith(FORM_CONTENT_TYPES):
        return {}
    form = await request.form()
    return {k: v for k, v in form.items() if isinstance(v, str)}


@router.get("", include_in_schema=False)
@router.get("/", include_in_schema=False)
def index():
    return RedirectResponse(url=LIST_PATH, status_code=303)


@router.api_route("/create", methods=["GET", "POST"], response_model=PersonForm)
def create_person(request: Request,
                  first_name: Optional[str] = Query(default=None, alias="firstName"),
                  last_name: Optional[str] = Query(default=None, alias="lastName"),
                  phone: Optional[str] = Query(default=None),
                  form: Dict[str, str] = Depends(_form_fields),
                  service: PersonService = Depends(get_person_service)):
    # Query string wins over the body when both carry a field
    if first_name is None:
        first_name = form.get("firstName")
    if last_name is None:
        last_name = form.get("lastName")
    if phone is None:
        phone = form.get("phone")
    submitted = len(request.query_params) > 0 or len(form) > 0
    try:
        result = service.create_person(first_name, last_name, phone, submitted=submitted)
    except Exception as exc:
        raise HTTPException(status_code=500, detail=f"Database error: {exc}")
    if result.state == "error":
        return JSONResponse(status_code=422, content=result.model_dump())
    if result.state == "success":
        return JSONResponse(status_code=201, content=result.model_dump())
    return result


@router.get("/list", response_model=PeopleList)
def list_people(service: PersonService = Depends(get_person_service)):
    people = service.list_people()
    return PeopleList(
        total=len(people),
        people=[PersonOut.model_validate(p) for p in people],
    )


@router.get("/details", response_model=PersonDetail)
def person_details(person_id: str = Query(..., alias="id"),
                   delete: Optional[str] = None,
                   service: PersonService = Depends(get_person_service)):
    pid = _parse_id(person_id)
    try:
        if delete is not None:
            service.delete_person(pid)
            return RedirectResponse(url=LIST_PATH, status_code=303)
        return PersonDetail.model_validate(service.get_person(pid))
    except PersonNotFoundError:
        raise HTTPException(status_code=404, detail="Person not found")
    except (AmbiguousPersonError, PersonHasPhoneNumbersError) as exc:
        raise HTTPException(status_code=409, detail=str(exc))
