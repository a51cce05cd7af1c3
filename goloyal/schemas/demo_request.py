"""Demo request schemas for the intake API."""

from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, StringConstraints
from pydantic.alias_generators import to_camel

from goloyal.models.demo_request import DemoRequest

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class DemoRequestIn(BaseModel):
    """Landing page form submission.

    Every field is required. Names and phone are trimmed before the
    non-empty check; email must be a valid address.
    """

    model_config = ConfigDict(alias_generator=to_camel)

    business_name: NonEmptyStr
    contact_name: NonEmptyStr
    email: EmailStr
    phone: NonEmptyStr


class DemoRequestCreated(BaseModel):
    success: bool = True
    message: str = "Demo request submitted successfully"
    id: str


class DemoRequestList(BaseModel):
    success: bool = True
    data: list[DemoRequest] = []


class FieldError(BaseModel):
    """Single failing field in a validation error response."""

    field: str
    message: str
    code: str


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    errors: Optional[list[FieldError]] = None
    stack: Optional[str] = None
