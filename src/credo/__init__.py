"""Credo - Course enrollment registry for Credo University."""

__version__ = "0.1.0"
