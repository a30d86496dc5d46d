"""REST API for Credo."""

from credo.api.app import app, create_app
from credo.api.models import (
    APIResponse,
    CourseResponse,
    EnrollmentResponse,
    StudentResponse,
)

__all__ = [
    "APIResponse",
    "CourseResponse",
    "EnrollmentResponse",
    "StudentResponse",
    "app",
    "create_app",
]
