import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import RedirectResponse

from app.api.deps import get_student_repository, templates
from app.models.models import Student
from app.repositories.student_repository import StudentRepository
from app.schemas.student import FieldError, bind_student

logger = logging.getLogger(__name__)

router = APIRouter()

VIEWS_STUDENT_CREATE_OR_UPDATE_FORM = "students/create_or_update_student_form.html"
VIEWS_FIND_STUDENTS = "students/find_students.html"
VIEWS_STUDENTS_LIST = "students/students_list.html"
VIEWS_STUDENT_DETAILS = "students/student_details.html"


def _redirect_to_student(student_id: int, status_code: int = status.HTTP_303_SEE_OTHER) -> RedirectResponse:
    return RedirectResponse(url=f"/students/{student_id}", status_code=status_code)


@router.get("/new")
def init_creation_form(request: Request) -> Any:
    """
    Empty form for a new student.
    """
    return templates.TemplateResponse(
        request, VIEWS_STUDENT_CREATE_OR_UPDATE_FORM, {"student": Student(), "errors": []}
    )


@router.post("/new")
async def process_creation_form(
    request: Request,
    students: StudentRepository = Depends(get_student_repository),
) -> Any:
    """
    Create a student from the submitted form, or show the form again with its errors.
    """
    form = await request.form()
    student, errors = bind_student(form)
    if errors:
        logger.info("Rejected new student: %s", [error.field for error in errors])
        return templates.TemplateResponse(
            request, VIEWS_STUDENT_CREATE_OR_UPDATE_FORM, {"student": student, "errors": errors}
        )

    await run_in_threadpool(students.save, student)
    return _redirect_to_student(student.id)


@router.get("/find")
def init_find_form(request: Request) -> Any:
    return templates.TemplateResponse(
        request, VIEWS_FIND_STUDENTS, {"student": Student(), "errors": []}
    )


@router.get("")
def process_find_form(
    request: Request,
    last_name: Optional[str] = None,
    students: StudentRepository = Depends(get_student_repository),
) -> Any:
    """
    Search students by last name prefix.

    A request without a last name lists every student. A single match
    goes straight to that student's page.
    """
    if last_name is None:
        last_name = ""

    results = students.find_by_last_name(last_name)
    if not results:
        errors = [FieldError(field="last_name", message="not found")]
        return templates.TemplateResponse(
            request, VIEWS_FIND_STUDENTS, {"student": Student(last_name=last_name), "errors": errors}
        )
    if len(results) == 1:
        return _redirect_to_student(results[0].id, status_code=status.HTTP_302_FOUND)
    return templates.TemplateResponse(request, VIEWS_STUDENTS_LIST, {"selections": results})


@router.get("/{student_id}/edit")
def init_update_student_form(
    request: Request,
    student_id: int,
    students: StudentRepository = Depends(get_student_repository),
) -> Any:
    student = students.find_by_id(student_id)
    return templates.TemplateResponse(
        request, VIEWS_STUDENT_CREATE_OR_UPDATE_FORM, {"student": student, "errors": []}
    )


@router.post("/{student_id}/edit")
async def process_update_student_form(
    request: Request,
    student_id: int,
    students: StudentRepository = Depends(get_student_repository),
) -> Any:
    """
    Update a student from the submitted form.

    The student is always saved under the id from the path.
    """
    form = await request.form()
    student, errors = bind_student(form)
    if errors:
        logger.info("Rejected update of student %s: %s", student_id, [error.field for error in errors])
        student.id = student_id
        return templates.TemplateResponse(
            request, VIEWS_STUDENT_CREATE_OR_UPDATE_FORM, {"student": student, "errors": errors}
        )

    student.id = student_id
    await run_in_threadpool(students.save, student)
    return _redirect_to_student(student_id)


@router.get("/{student_id}")
def show_student(
    request: Request,
    student_id: int,
    students: StudentRepository = Depends(get_student_repository),
) -> Any:
    """
    Details page for one student.
    """
    student = students.find_by_id(student_id)
    return templates.TemplateResponse(request, VIEWS_STUDENT_DETAILS, {"student": student})
