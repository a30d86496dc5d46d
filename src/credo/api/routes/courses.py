"""Course and course enrollment endpoints."""

from fastapi import APIRouter, Query, Response, status

from credo.api.dependencies import RegistrarDep
from credo.api.models import (
    OUTCOME_STATUS,
    APIResponse,
    CourseResponse,
    EnrollmentResponse,
    course_to_response,
    enrollment_list_response,
    enrollment_to_response,
)

router = APIRouter(prefix="/courses", tags=["courses"])


@router.get("", response_model=APIResponse[list[CourseResponse]])
def list_courses(registrar: RegistrarDep) -> APIResponse[list[CourseResponse]]:
    """List all courses."""
    courses = registrar.list_courses()
    return APIResponse(data=[course_to_response(c) for c in courses], total_count=len(courses))


@router.post(
    "",
    response_model=APIResponse[CourseResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_course(
    registrar: RegistrarDep,
    course_name: str | None = Query(default=None, min_length=1, description="Course name"),
) -> APIResponse[CourseResponse]:
    """Create a new course. Unnamed courses get a placeholder name."""
    result = registrar.create_course(course_name)
    return APIResponse(data=course_to_response(result.data))


@router.get("/{course_id}", response_model=APIResponse[list[CourseResponse]])
def get_course(course_id: int, registrar: RegistrarDep) -> APIResponse[list[CourseResponse]]:
    """Get a course by ID. Returns an empty list if there is no such course."""
    course = registrar.get_course(course_id)
    return APIResponse(data=[course_to_response(c) for c in course])


@router.put("/{course_id}/{course_name}", status_code=status.HTTP_204_NO_CONTENT)
def update_course_name(course_id: int, course_name: str, registrar: RegistrarDep) -> None:
    """Rename a course."""
    registrar.update_course_name(course_id, course_name)


@router.delete("/{course_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_course(course_id: int, registrar: RegistrarDep) -> None:
    """Delete a course and its enrollments."""
    registrar.delete_course(course_id)


@router.get("/{course_id}/students", response_model=APIResponse[list[EnrollmentResponse]])
def list_course_students(
    course_id: int, registrar: RegistrarDep
) -> APIResponse[list[EnrollmentResponse]]:
    """List enrollment records for a course."""
    return enrollment_list_response(registrar.list_course_students(course_id))


@router.get(
    "/{course_id}/students/{student_id}",
    response_model=APIResponse[list[EnrollmentResponse]],
)
def get_enrollee(
    course_id: int, student_id: int, registrar: RegistrarDep
) -> APIResponse[list[EnrollmentResponse]]:
    """Get the enrollment record for a student in a course."""
    enrollee = registrar.get_enrollee(course_id, student_id)
    return APIResponse(data=[enrollment_to_response(e) for e in enrollee])


@router.post(
    "/{course_id}/students/{student_id}",
    response_model=APIResponse[str],
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_403_FORBIDDEN: {"model": APIResponse[None]}},
)
def enroll(
    course_id: int, student_id: int, registrar: RegistrarDep, response: Response
) -> APIResponse[str]:
    """Enroll a student in a course.

    Responds 403 with the rule's message when the enrollment is rejected.
    """
    result = registrar.enroll(course_id, student_id)
    response.status_code = OUTCOME_STATUS[result.outcome]
    if result.allowed:
        return APIResponse(data=result.message)
    return APIResponse(error=result.message)


@router.delete("/{course_id}/students/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def unenroll(course_id: int, student_id: int, registrar: RegistrarDep) -> None:
    """Remove a student from a course."""
    registrar.unenroll(course_id, student_id)
