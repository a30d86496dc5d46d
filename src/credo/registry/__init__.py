"""Registry - In-memory enrollment records and the rules that guard them."""

from credo.registry.exceptions import (
    EmptyCollectionError,
    RegistryError,
    SeedDataError,
)
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
from credo.registry.registrar import Registrar
from credo.registry.rules import COURSE_CAPACITY, STUDENT_CAPACITY, can_enroll
from credo.registry.seed import load_seed
from credo.registry.store import EntityStore

__all__ = [
    "COURSE_CAPACITY",
    "Collection",
    "Course",
    "DEFAULT_NAME",
    "Decision",
    "EmptyCollectionError",
    "Enrollment",
    "EnrollmentResult",
    "EntityStore",
    "OperationResult",
    "Outcome",
    "Registrar",
    "RegistryError",
    "STUDENT_CAPACITY",
    "SeedDataError",
    "Student",
    "can_enroll",
    "load_seed",
]
