"""Catalog consistency check helpers."""

from .checks import (
    IntegrationCheckResult,
    check_catalog_not_empty,
    check_quiz_catalog,
    run_all_checks,
)

__all__ = [
    "IntegrationCheckResult",
    "check_catalog_not_empty",
    "check_quiz_catalog",
    "run_all_checks",
]
