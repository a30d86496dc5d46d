"""Integration tests for concurrent Registrar access."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from credo.registry import Collection, Decision, Registrar


@pytest.mark.integration
class TestConcurrentEnrollment:
    """Enrollment decisions stay consistent under concurrent requests."""

    def test_same_pair_enrolled_once(self, make_store) -> None:
        """Many requests for one pair produce a single enrollment."""
        registrar = Registrar(make_store())

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: registrar.enroll(1, 1), range(32)))

        decisions = [r.decision for r in results]
        assert decisions.count(Decision.ALLOWED) == 1
        assert decisions.count(Decision.ALREADY_ENROLLED) == 31
        assert registrar.store.count(Collection.ENROLLMENTS) == 1

    def test_course_capacity_holds(self, make_store) -> None:
        """A course never exceeds its capacity when students race for seats."""
        registrar = Registrar(make_store(student_ids=range(1, 41)), course_capacity=20)

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda s: registrar.enroll(1, s), range(1, 41)))

        allowed = [r for r in results if r.allowed]
        assert len(allowed) == 20
        assert registrar.store.count(Collection.ENROLLMENTS, lambda e: e.course_id == 1) == 20

    def test_delete_during_enrollment(self, make_store) -> None:
        """No enrollment outlives its deleted student."""
        registrar = Registrar(make_store(student_ids=range(1, 11), course_ids=range(1, 6)))

        def work(student_id: int) -> None:
            for course_id in range(1, 6):
                registrar.enroll(course_id, student_id)
            if student_id % 2 == 0:
                registrar.delete_student(student_id)

        with ThreadPoolExecutor(max_workers=5) as pool:
            list(pool.map(work, range(1, 11)))

        remaining = registrar.store.find_all(Collection.ENROLLMENTS)
        assert all(e.student_id % 2 == 1 for e in remaining)
        assert len(remaining) == 25
