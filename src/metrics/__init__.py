"""Metrics module for Quota Gate service."""

from prometheus_client import (
    Counter,
    Histogram,
)

# Counter to track REST API calls
# This will be used to count how many times each API endpoint is called
# and the status code of the response
rest_api_calls_total = Counter(
    "qg_rest_api_calls_total", "REST API calls counter", ["path", "status_code"]
)

# Histogram to measure response durations
# This will be used to track how long it takes to handle requests
response_duration_seconds = Histogram(
    "qg_response_duration_seconds", "Response durations", ["path"]
)

# Counter with results of authorization checks
# (authorized, quota_exceeded, unauthorized)
authorization_verdicts_total = Counter(
    "qg_authorization_verdicts_total", "Authorization verdicts", ["verdict"]
)

# Counter of credential lifecycle operations (create, delete)
credential_operations_total = Counter(
    "qg_credential_operations_total", "Credential lifecycle operations", ["operation"]
)

# Counter of monthly quota resets, labelled by outcome (success, failure)
quota_resets_total = Counter(
    "qg_quota_resets_total", "Monthly quota usage resets", ["outcome"]
)
