"""Prometheus exporter helpers."""

from __future__ import annotations

from prometheus_client import Counter


quiz_submissions_total = Counter(
    "quiz_submissions_total",
    "Total number of style quiz submissions by outcome.",
    ["outcome"],
)

quiz_unresolved_slugs_total = Counter(
    "quiz_unresolved_slugs_total",
    "Quiz-ranked aesthetic slugs that were missing from the catalog.",
)

product_rankings_total = Counter(
    "product_rankings_total",
    "Total number of product ranking requests.",
)
