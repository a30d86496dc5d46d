"""Pydantic models for REST API."""

from typing import Any, Generic, TypeVar

from fastapi import status
from pydantic import BaseModel, ConfigDict

from credo.registry import Outcome

T = TypeVar("T")

OUTCOME_STATUS = {
    Outcome.OK: status.HTTP_200_OK,
    Outcome.CREATED: status.HTTP_201_CREATED,
    Outcome.NO_CONTENT: status.HTTP_204_NO_CONTENT,
    Outcome.FORBIDDEN: status.HTTP_403_FORBIDDEN,
}


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper.

    ``total_count`` is only set on listing endpoints.
    """

    data: T | None = None
    error: str | None = None
    total_count: int | None = None


class WelcomeResponse(BaseModel):
    """Response model for the root endpoint."""

    message: str


# Course models


class CourseResponse(BaseModel):
    """Response model for a course."""

    model_config = ConfigDict(from_attributes=True)

    course_id: int
    course_name: str


def course_to_response(course: Any) -> CourseResponse:
    """Convert a Course record to CourseResponse."""
    return CourseResponse.model_validate(course)


# Student models


class StudentResponse(BaseModel):
    """Response model for a student."""

    model_config = ConfigDict(from_attributes=True)

    student_id: int
    student_name: str


def student_to_response(student: Any) -> StudentResponse:
    """Convert a Student record to StudentResponse."""
    return StudentResponse.model_validate(student)


# Enrollment models


class EnrollmentResponse(BaseModel):
    """Response model for an enrollment record."""

    model_config = ConfigDict(from_attributes=True)

    student_id: int
    course_id: int


def enrollment_to_response(enrollment: Any) -> EnrollmentResponse:
    """Convert an Enrollment record to EnrollmentResponse."""
    return EnrollmentResponse.model_validate(enrollment)


def enrollment_list_response(enrollments: list[Any]) -> APIResponse[list[EnrollmentResponse]]:
    """Wrap enrollment records in a counted listing response."""
    return APIResponse(
        data=[enrollment_to_response(e) for e in enrollments],
        total_count=len(enrollments),
    )
