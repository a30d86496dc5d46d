"""EntityStore - In-memory tables for students, courses and enrollments."""

from __future__ import annotations

import logging
import threading
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from credo.registry.models import Collection, Course, Enrollment, Student

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

logger = logging.getLogger(__name__)

Record = Student | Course | Enrollment


class EntityStore:
    """Owns the three ordered collections.

    Lookups are linear scans; insertion order is the listing order. Reads
    return copies of the stored records, so the only way to change a record
    is through the store.

    The store carries a single re-entrant lock guarding all three collections.
    Callers that need a check-then-write sequence to be atomic hold
    ``store.lock`` across it.
    """

    def __init__(
        self,
        students: Iterable[Student] = (),
        courses: Iterable[Course] = (),
        enrollments: Iterable[Enrollment] = (),
    ) -> None:
        """Initialize the store, optionally pre-populated.

        Args:
            students: Initial student records, in listing order
            courses: Initial course records, in listing order
            enrollments: Initial enrollment records, in listing order
        """
        self.lock = threading.RLock()
        self._tables: dict[Collection, list[Any]] = {
            Collection.STUDENTS: list(students),
            Collection.COURSES: list(courses),
            Collection.ENROLLMENTS: list(enrollments),
        }

    def insert(self, collection: Collection, record: Record) -> None:
        """Append a record to the end of a collection."""
        with self.lock:
            self._tables[collection].append(record)
        logger.debug("Inserted %r into %s", record, collection)

    def find_all(
        self,
        collection: Collection,
        predicate: Callable[[Any], bool] | None = None,
    ) -> list[Any]:
        """Return copies of all records matching a predicate.

        Args:
            collection: Table to scan
            predicate: Filter; None matches every record

        Returns:
            Matching records in insertion order
        """
        with self.lock:
            return [
                replace(record)
                for record in self._tables[collection]
                if predicate is None or predicate(record)
            ]

    def count(
        self,
        collection: Collection,
        predicate: Callable[[Any], bool] | None = None,
    ) -> int:
        """Count records matching a predicate without copying them."""
        with self.lock:
            return sum(
                1 for record in self._tables[collection] if predicate is None or predicate(record)
            )

    def remove_where(self, collection: Collection, predicate: Callable[[Any], bool]) -> int:
        """Remove every record matching a predicate.

        The collection is rebuilt from the records to keep, so no record is
        skipped or visited twice.

        Args:
            collection: Table to filter
            predicate: Records for which this returns True are removed

        Returns:
            Number of records removed
        """
        with self.lock:
            table = self._tables[collection]
            kept = [record for record in table if not predicate(record)]
            removed = len(table) - len(kept)
            self._tables[collection] = kept
        if removed:
            logger.debug("Removed %d record(s) from %s", removed, collection)
        return removed

    def update_where(
        self,
        collection: Collection,
        predicate: Callable[[Any], bool],
        **changes: Any,
    ) -> int:
        """Set attributes on every record matching a predicate.

        Args:
            collection: Table to update
            predicate: Records for which this returns True are updated
            **changes: Attribute values to assign

        Returns:
            Number of records updated
        """
        with self.lock:
            table = self._tables[collection]
            updated = 0
            for index, record in enumerate(table):
                if predicate(record):
                    table[index] = replace(record, **changes)
                    updated += 1
        return updated
