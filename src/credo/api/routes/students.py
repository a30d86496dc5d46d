"""Student endpoints."""

from fastapi import APIRouter, Query, status

from credo.api.dependencies import RegistrarDep
from credo.api.models import (
    APIResponse,
    EnrollmentResponse,
    StudentResponse,
    enrollment_list_response,
    student_to_response,
)

router = APIRouter(prefix="/students", tags=["students"])


@router.get("", response_model=APIResponse[list[StudentResponse]])
def list_students(registrar: RegistrarDep) -> APIResponse[list[StudentResponse]]:
    """List all students."""
    students = registrar.list_students()
    return APIResponse(data=[student_to_response(s) for s in students], total_count=len(students))


@router.post(
    "",
    response_model=APIResponse[StudentResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_student(
    registrar: RegistrarDep,
    student_name: str | None = Query(default=None, min_length=1, description="Student name"),
) -> APIResponse[StudentResponse]:
    """Create a new student. Unnamed students get a placeholder name."""
    result = registrar.create_student(student_name)
    return APIResponse(data=student_to_response(result.data))


@router.get("/{student_id}", response_model=APIResponse[list[StudentResponse]])
def get_student(student_id: int, registrar: RegistrarDep) -> APIResponse[list[StudentResponse]]:
    """Get a student by ID. Returns an empty list if there is no such student."""
    student = registrar.get_student(student_id)
    return APIResponse(data=[student_to_response(s) for s in student])


@router.get("/{student_id}/courses", response_model=APIResponse[list[EnrollmentResponse]])
def list_student_courses(
    student_id: int, registrar: RegistrarDep
) -> APIResponse[list[EnrollmentResponse]]:
    """List enrollment records for a student."""
    return enrollment_list_response(registrar.list_student_courses(student_id))


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_student(student_id: int, registrar: RegistrarDep) -> None:
    """Delete a student and their enrollments."""
    registrar.delete_student(student_id)
