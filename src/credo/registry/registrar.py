"""Registrar - Main API for course enrollment operations."""

from __future__ import annotations

import logging

from credo.registry import cascade
from credo.registry.identifiers import next_course_id, next_student_id
from credo.registry.models import (
    DEFAULT_NAME,
    Collection,
    Course,
    Decision,
    Enrollment,
    EnrollmentResult,
    OperationResult,
    Outcome,
    Student,
)
from credo.registry.rules import (
    COURSE_CAPACITY,
    STUDENT_CAPACITY,
    can_enroll,
    decision_message,
    decision_outcome,
)
from credo.registry.store import EntityStore

logger = logging.getLogger(__name__)


class Registrar:
    """Main API for Registry operations.

    Provides list/get/create/update/delete for courses and students, and
    enroll/unenroll for enrollments. Every operation runs under the store's
    lock, so rule checks and cascades are atomic with the writes they guard.

    Lookups for an unknown id return an empty list, and updates or deletes
    of an unknown id do nothing.
    """

    def __init__(
        self,
        store: EntityStore | None = None,
        student_capacity: int = STUDENT_CAPACITY,
        course_capacity: int = COURSE_CAPACITY,
        default_name: str = DEFAULT_NAME,
    ) -> None:
        """Initialize the Registrar.

        Args:
            store: EntityStore to operate on. A new empty store if omitted.
            student_capacity: Maximum enrollments per student
            course_capacity: Maximum enrollments per course
            default_name: Name given to students and courses created without one
        """
        self.store = store if store is not None else EntityStore()
        self.student_capacity = student_capacity
        self.course_capacity = course_capacity
        self.default_name = default_name

    # --- Course Operations ---

    def list_courses(self) -> list[Course]:
        """List all courses in insertion order."""
        return self.store.find_all(Collection.COURSES)

    def get_course(self, course_id: int) -> list[Course]:
        """Get the course with the given id, as a list of zero or one."""
        return self.store.find_all(Collection.COURSES, lambda c: c.course_id == course_id)

    def create_course(self, course_name: str | None = None) -> OperationResult:
        """Create a new course.

        Args:
            course_name: Course name. Falls back to the default name when None.

        Returns:
            OperationResult tagged CREATED, carrying the new Course
        """
        with self.store.lock:
            courses = self.store.find_all(Collection.COURSES)
            course = Course(
                course_id=next_course_id(courses, seed=0),
                course_name=self.default_name if course_name is None else course_name,
            )
            self.store.insert(Collection.COURSES, course)
        logger.info("Created course %s (%s)", course.course_id, course.course_name)
        return OperationResult(outcome=Outcome.CREATED, data=course)

    def update_course_name(self, course_id: int, course_name: str) -> OperationResult:
        """Rename the course with the given id, if it exists."""
        updated = self.store.update_where(
            Collection.COURSES,
            lambda c: c.course_id == course_id,
            course_name=course_name,
        )
        if updated:
            logger.info("Renamed course %s to %s", course_id, course_name)
        return OperationResult(outcome=Outcome.NO_CONTENT)

    def delete_course(self, course_id: int) -> OperationResult:
        """Delete a course and every enrollment referencing it."""
        with self.store.lock:
            removed = self.store.remove_where(
                Collection.COURSES, lambda c: c.course_id == course_id
            )
            dropped = cascade.on_course_deleted(self.store, course_id)
        if removed:
            logger.info("Deleted course %s (%d enrollment(s) removed)", course_id, dropped)
        return OperationResult(outcome=Outcome.NO_CONTENT)

    # --- Enrollment Operations ---

    def list_course_students(self, course_id: int) -> list[Enrollment]:
        """List enrollment records for a course."""
        return self.store.find_all(Collection.ENROLLMENTS, lambda e: e.course_id == course_id)

    def get_enrollee(self, course_id: int, student_id: int) -> list[Enrollment]:
        """Get the enrollment record for a (course, student) pair, as a list of zero or one."""
        return self.store.find_all(
            Collection.ENROLLMENTS,
            lambda e: e.course_id == course_id and e.student_id == student_id,
        )

    def enroll(self, course_id: int, student_id: int) -> EnrollmentResult:
        """Enroll a student in a course if the enrollment rules allow it.

        Checks, in order: the pair is not already enrolled, the student is
        below capacity, the course is below capacity, and both records exist.
        The record is inserted only when every check passes.

        Args:
            course_id: Course to join
            student_id: Student to enroll

        Returns:
            EnrollmentResult with the decision, its outcome tag and message
        """
        with self.store.lock:
            decision = can_enroll(
                student_id,
                course_id,
                self.store.find_all(Collection.ENROLLMENTS),
                student_capacity=self.student_capacity,
                course_capacity=self.course_capacity,
            )
            if decision is Decision.ALLOWED and not self._references_exist(course_id, student_id):
                decision = Decision.UNKNOWN_REFERENCE
            if decision is Decision.ALLOWED:
                self.store.insert(
                    Collection.ENROLLMENTS,
                    Enrollment(student_id=student_id, course_id=course_id),
                )

        if decision is Decision.ALLOWED:
            logger.info("Enrolled student %s in course %s", student_id, course_id)
        else:
            logger.info(
                "Rejected enrollment of student %s in course %s: %s",
                student_id,
                course_id,
                decision,
            )
        return EnrollmentResult(
            decision=decision,
            outcome=decision_outcome(decision),
            message=decision_message(decision, student_capacity=self.student_capacity),
        )

    def unenroll(self, course_id: int, student_id: int) -> OperationResult:
        """Remove a student from a course. Does nothing if not enrolled."""
        removed = self.store.remove_where(
            Collection.ENROLLMENTS,
            lambda e: e.course_id == course_id and e.student_id == student_id,
        )
        if removed:
            logger.info("Unenrolled student %s from course %s", student_id, course_id)
        return OperationResult(outcome=Outcome.NO_CONTENT)

    # --- Student Operations ---

    def list_students(self) -> list[Student]:
        """List all students in insertion order."""
        return self.store.find_all(Collection.STUDENTS)

    def get_student(self, student_id: int) -> list[Student]:
        """Get the student with the given id, as a list of zero or one."""
        return self.store.find_all(Collection.STUDENTS, lambda s: s.student_id == student_id)

    def list_student_courses(self, student_id: int) -> list[Enrollment]:
        """List enrollment records for a student."""
        return self.store.find_all(Collection.ENROLLMENTS, lambda e: e.student_id == student_id)

    def create_student(self, student_name: str | None = None) -> OperationResult:
        """Create a new student.

        Args:
            student_name: Student name. Falls back to the default name when None.

        Returns:
            OperationResult tagged CREATED, carrying the new Student
        """
        with self.store.lock:
            students = self.store.find_all(Collection.STUDENTS)
            student = Student(
                student_id=next_student_id(students),
                student_name=self.default_name if student_name is None else student_name,
            )
            self.store.insert(Collection.STUDENTS, student)
        logger.info("Created student %s (%s)", student.student_id, student.student_name)
        return OperationResult(outcome=Outcome.CREATED, data=student)

    def delete_student(self, student_id: int) -> OperationResult:
        """Delete a student and every enrollment referencing it."""
        with self.store.lock:
            removed = self.store.remove_where(
                Collection.STUDENTS, lambda s: s.student_id == student_id
            )
            dropped = cascade.on_student_deleted(self.store, student_id)
        if removed:
            logger.info("Deleted student %s (%d enrollment(s) removed)", student_id, dropped)
        return OperationResult(outcome=Outcome.NO_CONTENT)

    def _references_exist(self, course_id: int, student_id: int) -> bool:
        """Whether both the course and the student are on record."""
        return (
            self.store.count(Collection.COURSES, lambda c: c.course_id == course_id) > 0
            and self.store.count(Collection.STUDENTS, lambda s: s.student_id == student_id) > 0
        )
