"""Prometheus metrics definitions for Sous Chef."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

REQUEST_COUNT = Counter(
    "souschef_http_requests_total",
    "Total number of HTTP requests processed by the Sous Chef API",
    ["method", "path", "status"],
)

REQUEST_LATENCY = Histogram(
    "souschef_http_request_duration_seconds",
    "Latency of HTTP requests processed by the Sous Chef API",
    ["method", "path"],
)

SHOPPING_LISTS_GENERATED = Counter(
    "souschef_shopping_lists_generated_total",
    "Number of shopping lists generated, by source",
    ["source"],
)

ITEMS_CONSOLIDATED = Counter(
    "souschef_shopping_items_consolidated_total",
    "Number of consolidated items written to generated shopping lists",
)

UNIT_CONVERSIONS = Counter(
    "souschef_unit_conversions_total",
    "Unit conversion requests served by the API, by result",
    ["result"],
)

__all__ = [
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "SHOPPING_LISTS_GENERATED",
    "ITEMS_CONSOLIDATED",
    "UNIT_CONVERSIONS",
]
