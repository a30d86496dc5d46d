"""Enrollment rules - decides whether a student may join a course."""

from __future__ import annotations

from typing import TYPE_CHECKING

from credo.registry.models import Decision, Outcome

if TYPE_CHECKING:
    from collections.abc import Iterable

    from credo.registry.models import Enrollment

STUDENT_CAPACITY = 5
COURSE_CAPACITY = 20

MSG_ALREADY_ENROLLED = "Student is already enrolled in the course"
MSG_STUDENT_AT_CAPACITY = "Student is already enrolled in {capacity} classes"
MSG_COURSE_AT_CAPACITY = "Class is full, unable to enroll student"
MSG_UNKNOWN_REFERENCE = "Student or course does not exist"
MSG_ENROLLED = "Student successfully enrolled in course"


def can_enroll(
    student_id: int,
    course_id: int,
    enrollments: Iterable[Enrollment],
    student_capacity: int = STUDENT_CAPACITY,
    course_capacity: int = COURSE_CAPACITY,
) -> Decision:
    """Evaluate the enrollment rules for one (student, course) pair.

    Rules are checked in priority order: an existing enrollment for the pair
    wins over a full student schedule, which wins over a full course.

    Args:
        student_id: Student asking to enroll
        course_id: Course being joined
        enrollments: Every current enrollment record
        student_capacity: Maximum enrollments per student
        course_capacity: Maximum enrollments per course

    Returns:
        The first rule that rejects the pair, or Decision.ALLOWED
    """
    already_enrolled = False
    student_count = 0
    course_count = 0
    for enrollment in enrollments:
        if enrollment.student_id == student_id:
            student_count += 1
            if enrollment.course_id == course_id:
                already_enrolled = True
        if enrollment.course_id == course_id:
            course_count += 1

    if already_enrolled:
        return Decision.ALREADY_ENROLLED
    if student_count >= student_capacity:
        return Decision.STUDENT_AT_CAPACITY
    if course_count >= course_capacity:
        return Decision.COURSE_AT_CAPACITY
    return Decision.ALLOWED


def decision_message(decision: Decision, student_capacity: int = STUDENT_CAPACITY) -> str:
    """Return the user-facing message for a decision."""
    if decision is Decision.ALREADY_ENROLLED:
        return MSG_ALREADY_ENROLLED
    if decision is Decision.STUDENT_AT_CAPACITY:
        return MSG_STUDENT_AT_CAPACITY.format(capacity=student_capacity)
    if decision is Decision.COURSE_AT_CAPACITY:
        return MSG_COURSE_AT_CAPACITY
    if decision is Decision.UNKNOWN_REFERENCE:
        return MSG_UNKNOWN_REFERENCE
    return MSG_ENROLLED


def decision_outcome(decision: Decision) -> Outcome:
    """Map a decision to the status tag reported to the transport layer."""
    return Outcome.CREATED if decision is Decision.ALLOWED else Outcome.FORBIDDEN
