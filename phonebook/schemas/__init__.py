# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Pydantic response schemas."""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict

FORM_STATES = ("initial", "error", "success")


class PhoneNumberOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    number: str
    person_id: int


class PersonOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str


class PersonDetail(PersonOut):
    phone_numbers: List[PhoneNumberOut] = []


class PeopleList(BaseModel):
    total: int
    people: List[PersonOut]


class PersonForm(BaseModel):
    """Outcome of a create request, echoed back so the form can be redisplayed."""
    state: str = "initial"
    errors: List[str] = []
    message: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    person: Optional[PersonDetail] = None


class ErrorResponse(BaseModel):
    error: str
    detail: Optional[str] = None
