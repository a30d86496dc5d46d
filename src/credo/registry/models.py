"""Data models for the Registry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

DEFAULT_NAME = "TO BE DETERMINED"


class Collection(StrEnum):
    """The three tables held by the EntityStore."""

    STUDENTS = "students"
    COURSES = "courses"
    ENROLLMENTS = "enrollments"


class Decision(StrEnum):
    """Outcome of evaluating the enrollment rules.

    Members are listed in priority order: when several rules are violated at
    once, the earliest one wins. UNKNOWN_REFERENCE is only produced by the
    Registrar, after the capacity rules have passed.
    """

    ALREADY_ENROLLED = "already_enrolled"
    STUDENT_AT_CAPACITY = "student_at_capacity"
    COURSE_AT_CAPACITY = "course_at_capacity"
    UNKNOWN_REFERENCE = "unknown_reference"
    ALLOWED = "allowed"


class Outcome(StrEnum):
    """Status tag returned by write operations.

    The API layer maps these onto HTTP status codes. ``OK`` stands for a
    successful read. Registrar reads return their records directly, so it
    only appears in the API layer's status mapping.
    """

    OK = "ok"
    CREATED = "created"
    NO_CONTENT = "no_content"
    FORBIDDEN = "forbidden"


@dataclass
class Student:
    """A student record."""

    student_id: int
    student_name: str

    def __repr__(self) -> str:
        return f"<Student(student_id={self.student_id!r}, student_name={self.student_name!r})>"


@dataclass
class Course:
    """A course record. The name may change; the id never does."""

    course_id: int
    course_name: str

    def __repr__(self) -> str:
        return f"<Course(course_id={self.course_id!r}, course_name={self.course_name!r})>"


@dataclass(frozen=True)
class Enrollment:
    """Junction record linking one student to one course.

    The (student_id, course_id) pair is the natural key.
    """

    student_id: int
    course_id: int

    def __repr__(self) -> str:
        return f"<Enrollment(student_id={self.student_id!r}, course_id={self.course_id!r})>"


@dataclass
class OperationResult:
    """Result of a write operation.

    Attributes:
        outcome: Status tag for the transport layer.
        data: Created record, if any.
    """

    outcome: Outcome
    data: Student | Course | None = None


@dataclass
class EnrollmentResult:
    """Result of an enroll attempt.

    Attributes:
        decision: Which rule (if any) rejected the enrollment.
        outcome: CREATED when the enrollment was inserted, FORBIDDEN otherwise.
        message: User-facing message, passed through verbatim.
    """

    decision: Decision
    outcome: Outcome
    message: str

    @property
    def allowed(self) -> bool:
        """Whether the enrollment was inserted."""
        return self.decision is Decision.ALLOWED
