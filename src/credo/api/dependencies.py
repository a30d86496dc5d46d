"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

import logging
from collections.abc import Generator  # noqa: TC003
from typing import Annotated

from fastapi import Depends

from credo.config import CredoConfig
from credo.registry import EntityStore, Registrar, load_seed

logger = logging.getLogger(__name__)


def build_registrar(config: CredoConfig) -> Registrar:
    """Create a Registrar from configuration, loading seed data if enabled."""
    if config.seed.enabled:
        store = load_seed(
            config.seed.path,
            student_capacity=config.capacity.student,
            course_capacity=config.capacity.course,
        )
    else:
        store = EntityStore()
        logger.info("Seed data disabled, starting with empty tables")

    return Registrar(
        store=store,
        student_capacity=config.capacity.student,
        course_capacity=config.capacity.course,
        default_name=config.default_name,
    )


# Global Registrar instance (initialized on app startup)
_registrar: Registrar | None = None


def init_registrar(config: CredoConfig | None = None) -> Registrar:
    """Initialize the global Registrar instance."""
    global _registrar  # noqa: PLW0603
    _registrar = build_registrar(config if config is not None else CredoConfig())
    return _registrar


def close_registrar() -> None:
    """Discard the global Registrar instance."""
    global _registrar  # noqa: PLW0603
    _registrar = None


def get_registrar() -> Generator[Registrar, None, None]:
    """Dependency that provides the Registrar instance."""
    if _registrar is None:
        raise RuntimeError("Registrar not initialized. Call init_registrar() first.")
    yield _registrar


# Type alias for dependency injection
RegistrarDep = Annotated[Registrar, Depends(get_registrar)]
