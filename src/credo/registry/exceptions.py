"""Custom exceptions for the Registry."""


class RegistryError(Exception):
    """Base exception for Registry errors."""


class EmptyCollectionError(RegistryError):
    """Cannot derive an identifier from an empty collection without a seed."""


class SeedDataError(RegistryError):
    """Seed data is malformed or breaks an enrollment rule."""
