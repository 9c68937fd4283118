from typing import Any, List, Mapping, Optional, Tuple
from datetime import date
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from app.models.models import Student

# Never bound from request data; the store assigns it
DISALLOWED_FIELDS = ("id",)

NOT_EMPTY_MESSAGE = "must not be empty"


class FieldError(BaseModel):
    field: str
    message: str


class StudentForm(BaseModel):
    """Fields a client may submit for a student, with their constraints."""

    model_config = ConfigDict(extra="ignore")

    student_id: str = Field(min_length=1)
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    sex: str = Field(min_length=1)
    birth_date: Optional[date] = None
    address: str = Field(min_length=1)
    department: str = Field(min_length=1)

    @field_validator("birth_date", mode="before")
    @classmethod
    def blank_birth_date(cls, v: Any) -> Any:
        # an empty date input means "no birth date"
        if v == "":
            return None
        return v


def _field_errors(exc: ValidationError) -> List[FieldError]:
    errors = []
    for error in exc.errors():
        field = str(error["loc"][0])
        if error["type"] in ("missing", "string_too_short"):
            message = NOT_EMPTY_MESSAGE
        else:
            message = error["msg"]
        errors.append(FieldError(field=field, message=message))
    return errors


def bind_student(data: Mapping[str, Any]) -> Tuple[Student, List[FieldError]]:
    """
    Populate a transient Student from inbound request data.

    Any client-supplied identifier is dropped before validation, so the
    returned student never carries an id. Returns the student together
    with its field errors; an empty list means the student may be saved.
    When validation fails the student still holds the submitted values so
    the form can be re-rendered with them.
    """
    values = {key: value for key, value in data.items() if key not in DISALLOWED_FIELDS}

    try:
        form = StudentForm.model_validate(values)
    except ValidationError as exc:
        # echo the raw submitted values, birth date included
        student = Student(**{name: values.get(name) for name in StudentForm.model_fields})
        return student, _field_errors(exc)

    return Student(**form.model_dump()), []
