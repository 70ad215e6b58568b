"""Aesthetic matching and style quiz inference engine."""

__version__ = "0.1.0"
