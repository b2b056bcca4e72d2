"""Prometheus metrics definitions for the best-track service.

All metric objects are centralized here as module-level singletons and are
only touched by the HTTP layer; the parser itself records nothing.

The /metrics endpoint is mounted in besttrack/main.py via
prometheus_client.make_asgi_app().
"""

from __future__ import annotations

from prometheus_client import Counter, Gauge, Histogram, Info

# ─── App Info ───

APP_INFO = Info("app", "Application metadata")

# ─── HTTP Metrics ───

HTTP_REQUESTS_TOTAL = Counter(
    "http_requests_total",
    "Total HTTP requests",
    labelnames=["method", "path_template", "status_code"],
)

HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    labelnames=["method", "path_template"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

HTTP_REQUESTS_IN_PROGRESS = Gauge(
    "http_requests_in_progress",
    "HTTP requests currently in progress",
    labelnames=["method"],
)

# ─── Parse Metrics ───

STORMS_PARSED_TOTAL = Counter(
    "storms_parsed_total",
    "Total storms emitted by best-track parses",
    labelnames=["format"],
)

OBSERVATIONS_PARSED_TOTAL = Counter(
    "observations_parsed_total",
    "Total observations emitted by best-track parses",
    labelnames=["format"],
)

PARSE_DURATION_SECONDS = Histogram(
    "parse_duration_seconds",
    "Best-track parse duration in seconds",
    labelnames=["format"],
    buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 2.5, 5.0, 10.0),
)

REJECTED_PAYLOADS_TOTAL = Counter(
    "rejected_payloads_total",
    "Best-track payloads refused before parsing",
    labelnames=["reason"],
)


def set_app_info(version: str, environment: str) -> None:
    """Publish static application metadata."""
    APP_INFO.info({"version": version, "environment": environment})
