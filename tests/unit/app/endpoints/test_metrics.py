"""Unit tests for the /metrics REST API endpoint."""

from app.endpoints.metrics import metrics_endpoint_handler


def test_metrics_endpoint() -> None:
    """Test the metrics endpoint handler."""
    response = metrics_endpoint_handler()
    assert response is not None
    assert response.status_code == 200
    assert "text/plain" in response.headers["Content-Type"]

    response_body = response.body.decode()

    # Check if the response contains Prometheus metrics format
    assert "# TYPE qg_rest_api_calls_total counter" in response_body
    assert "# TYPE qg_response_duration_seconds histogram" in response_body
    assert "# TYPE qg_authorization_verdicts_total counter" in response_body
    assert "# TYPE qg_credential_operations_total counter" in response_body
    assert "# TYPE qg_quota_resets_total counter" in response_body
