"""Seed data loading for the EntityStore."""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

from credo.registry.exceptions import SeedDataError
from credo.registry.models import Course, Decision, Enrollment, Student
from credo.registry.rules import COURSE_CAPACITY, STUDENT_CAPACITY, can_enroll
from credo.registry.store import EntityStore

logger = logging.getLogger(__name__)

DEFAULT_SEED_RESOURCE = "seed.yaml"


def read_seed_document(path: Path | str | None = None) -> dict[str, Any]:
    """Read a seed YAML document.

    Args:
        path: Seed file. Defaults to the seed file shipped with the package.

    Returns:
        The parsed mapping.

    Raises:
        SeedDataError: If the file cannot be read or does not hold a YAML mapping.
    """
    try:
        if path is None:
            text = resources.files("credo.data").joinpath(DEFAULT_SEED_RESOURCE).read_text(
                encoding="utf-8"
            )
        else:
            text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise SeedDataError(f"Seed file not found: {path}") from e
    except UnicodeDecodeError as e:
        raise SeedDataError(f"Seed file is not valid UTF-8: {path}") from e
    except OSError as e:
        raise SeedDataError(f"Cannot read seed file {path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SeedDataError(f"Invalid YAML in seed file: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SeedDataError(f"Seed data must be a YAML mapping, got {type(data).__name__}")
    return data


def _int_field(entry: Any, key: str, section: str) -> int:
    if not isinstance(entry, dict) or key not in entry:
        raise SeedDataError(f"Entry in '{section}' is missing '{key}': {entry!r}")
    value = entry[key]
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise SeedDataError(f"'{key}' in '{section}' must be a positive integer, got {value!r}")
    return value


def build_store(
    data: dict[str, Any],
    student_capacity: int = STUDENT_CAPACITY,
    course_capacity: int = COURSE_CAPACITY,
) -> EntityStore:
    """Build an EntityStore from a parsed seed mapping.

    Enrollments are admitted one at a time through the enrollment rules, so a
    seed that would break uniqueness, capacity or referential integrity is
    rejected.

    Raises:
        SeedDataError: On malformed entries, duplicate ids or rule violations.
    """
    students: list[Student] = []
    for entry in data.get("students") or []:
        student_id = _int_field(entry, "student_id", "students")
        if any(s.student_id == student_id for s in students):
            raise SeedDataError(f"Duplicate student_id {student_id}")
        name = str(entry.get("student_name", ""))
        students.append(Student(student_id=student_id, student_name=name))

    courses: list[Course] = []
    for entry in data.get("courses") or []:
        course_id = _int_field(entry, "course_id", "courses")
        if any(c.course_id == course_id for c in courses):
            raise SeedDataError(f"Duplicate course_id {course_id}")
        name = str(entry.get("course_name", ""))
        courses.append(Course(course_id=course_id, course_name=name))

    student_ids = {s.student_id for s in students}
    course_ids = {c.course_id for c in courses}
    enrollments: list[Enrollment] = []
    for entry in data.get("enrollments") or []:
        student_id = _int_field(entry, "student_id", "enrollments")
        course_id = _int_field(entry, "course_id", "enrollments")
        if student_id not in student_ids or course_id not in course_ids:
            raise SeedDataError(
                f"Enrollment ({student_id}, {course_id}) references an unknown student or course"
            )
        decision = can_enroll(
            student_id,
            course_id,
            enrollments,
            student_capacity=student_capacity,
            course_capacity=course_capacity,
        )
        if decision is not Decision.ALLOWED:
            raise SeedDataError(f"Enrollment ({student_id}, {course_id}) rejected: {decision}")
        enrollments.append(Enrollment(student_id=student_id, course_id=course_id))

    logger.info(
        "Loaded seed data: %d student(s), %d course(s), %d enrollment(s)",
        len(students),
        len(courses),
        len(enrollments),
    )
    return EntityStore(students=students, courses=courses, enrollments=enrollments)


def load_seed(
    path: Path | str | None = None,
    student_capacity: int = STUDENT_CAPACITY,
    course_capacity: int = COURSE_CAPACITY,
) -> EntityStore:
    """Load a seed file into a new EntityStore.

    Args:
        path: Seed file. Defaults to the seed file shipped with the package.
        student_capacity: Maximum enrollments per student
        course_capacity: Maximum enrollments per course

    Returns:
        A populated EntityStore.
    """
    return build_store(
        read_seed_document(path),
        student_capacity=student_capacity,
        course_capacity=course_capacity,
    )
