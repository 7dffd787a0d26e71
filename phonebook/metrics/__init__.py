# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Prometheus metrics for the phone-directory service."""
from prometheus_client import Counter, Gauge, Histogram

PEOPLE_CREATED = Counter(
    "people_created_total", "Total people added to the directory"
)
PEOPLE_DELETED = Counter(
    "people_deleted_total", "Total people removed from the directory"
)
PERSON_DELETE_REJECTED = Counter(
    "person_delete_rejected_total",
    "Delete requests refused because phone numbers still reference the person",
)
FORM_VALIDATION_FAILURES = Counter(
    "person_form_validation_failures_total",
    "Create-form field violations",
    ["field"],
)
PEOPLE_TOTAL = Gauge(
    "people_total", "Current number of people in the directory"
)
REQUEST_COUNT = Counter(
    "http_requests_total", "Total HTTP requests", ["method", "endpoint", "status"]
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds", "HTTP request latency", ["method", "endpoint"]
)
HTTP_ERRORS = Counter(
    "http_errors_total", "Total HTTP errors", ["method", "endpoint", "status"]
)
