"""Prometheus metrics for the Jobly API.

Exposed at ``/metrics``. HTTP metrics are recorded by middleware in
``jobly.main``; search and mutation counters are bumped by the services.
"""

from prometheus_client import Counter, Gauge, Histogram, Info

APP_INFO = Info("jobly_app", "Jobly application information")

HTTP_REQUESTS_TOTAL = Counter(
    "jobly_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "jobly_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
)

HTTP_REQUESTS_IN_PROGRESS = Gauge(
    "jobly_http_requests_in_progress",
    "Number of HTTP requests currently in progress",
    ["method", "endpoint"],
)

SEARCHES_TOTAL = Counter(
    "jobly_searches_total",
    "List/search queries executed",
    ["resource", "filtered"],  # filtered: "true" when a WHERE clause was applied
)

MUTATIONS_TOTAL = Counter(
    "jobly_mutations_total",
    "Records created, updated or deleted",
    ["resource", "action"],
)

AUTH_ATTEMPTS_TOTAL = Counter(
    "jobly_auth_attempts_total",
    "Token requests by outcome",
    ["status"],  # success, failure
)


def set_app_info(version: str, environment: str) -> None:
    APP_INFO.info({"version": version, "environment": environment})


def record_search(resource: str, filtered: bool) -> None:
    SEARCHES_TOTAL.labels(resource=resource, filtered=str(filtered).lower()).inc()


def record_mutation(resource: str, action: str) -> None:
    MUTATIONS_TOTAL.labels(resource=resource, action=action).inc()


def record_auth_attempt(success: bool) -> None:
    AUTH_ATTEMPTS_TOTAL.labels(status="success" if success else "failure").inc()
