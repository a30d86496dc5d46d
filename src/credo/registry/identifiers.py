"""Identifier allocation for new students and courses.

The two strategies differ on purpose. Courses take ``max(course_id) + 1``,
so a deleted course id is never handed out again while a higher id exists.
Students take ``len(students) + 1``, which can repeat an id that is still in
use once a student has been deleted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from credo.registry.exceptions import EmptyCollectionError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from credo.registry.models import Course, Student


def next_course_id(courses: Sequence[Course], seed: int | None = None) -> int:
    """Return one more than the highest existing course id.

    Args:
        courses: Existing course records
        seed: Value treated as the current maximum when there are no courses

    Returns:
        The id for the next course

    Raises:
        EmptyCollectionError: If there are no courses and no seed was given
    """
    if not courses:
        if seed is None:
            raise EmptyCollectionError("Cannot allocate a course id from an empty collection")
        return seed + 1
    return max(course.course_id for course in courses) + 1


def next_student_id(students: Sequence[Student]) -> int:
    """Return the number of existing students plus one."""
    return len(students) + 1
