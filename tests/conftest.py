"""Shared pytest fixtures and configuration."""

import pytest

from credo.registry import Course, Enrollment, EntityStore, Registrar, Student, load_seed


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


@pytest.fixture
def empty_registrar() -> Registrar:
    """Create a Registrar over an empty store."""
    return Registrar(EntityStore())


@pytest.fixture
def seeded_store() -> EntityStore:
    """Load the packaged seed data into a fresh store."""
    return load_seed()


@pytest.fixture
def seeded_registrar(seeded_store: EntityStore) -> Registrar:
    """Create a Registrar over the packaged seed data."""
    return Registrar(seeded_store)


@pytest.fixture
def make_store():
    """Factory for small stores. ``pairs`` are (student_id, course_id) enrollments."""

    def _make_store(
        student_ids: range | list[int] = range(1, 4),
        course_ids: range | list[int] = range(1, 4),
        pairs: list[tuple[int, int]] | None = None,
    ) -> EntityStore:
        return EntityStore(
            students=[Student(student_id=i, student_name=f"Student {i}") for i in student_ids],
            courses=[Course(course_id=i, course_name=f"Course {i}") for i in course_ids],
            enrollments=[Enrollment(student_id=s, course_id=c) for s, c in pairs or []],
        )

    return _make_store
