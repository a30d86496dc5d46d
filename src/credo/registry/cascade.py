"""Cascade removal of enrollments for deleted students and courses."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from credo.registry.models import Collection

if TYPE_CHECKING:
    from credo.registry.store import EntityStore

logger = logging.getLogger(__name__)


def on_student_deleted(store: EntityStore, student_id: int) -> int:
    """Remove every enrollment referencing a student.

    Returns:
        Number of enrollments removed (0 when there were none)
    """
    removed = store.remove_where(Collection.ENROLLMENTS, lambda e: e.student_id == student_id)
    logger.debug("Cascade for student %s removed %d enrollment(s)", student_id, removed)
    return removed


def on_course_deleted(store: EntityStore, course_id: int) -> int:
    """Remove every enrollment referencing a course.

    Returns:
        Number of enrollments removed (0 when there were none)
    """
    removed = store.remove_where(Collection.ENROLLMENTS, lambda e: e.course_id == course_id)
    logger.debug("Cascade for course %s removed %d enrollment(s)", course_id, removed)
    return removed
