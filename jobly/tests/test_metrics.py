"""Tests for Prometheus metrics module."""

from prometheus_client import REGISTRY

from jobly.core.metrics import record_auth_attempt, record_mutation, record_search
from jobly.main import _endpoint_label


def _sample(name, labels):
    return REGISTRY.get_sample_value(name, labels) or 0.0


class TestMetricsEndpoint:
    def test_prometheus_format(self, client):
        client.get("/health")

        response = client.get("/metrics")

        assert response.status_code == 200
        assert "text/plain" in response.headers["content-type"]
        assert "jobly_http_requests_total" in response.text
        assert "jobly_app_info" in response.text


class TestRecorders:
    def test_record_search(self):
        labels = {"resource": "company", "filtered": "true"}
        before = _sample("jobly_searches_total", labels)

        record_search("company", True)

        assert _sample("jobly_searches_total", labels) == before + 1

    def test_record_mutation(self):
        labels = {"resource": "job", "action": "update"}
        before = _sample("jobly_mutations_total", labels)

        record_mutation("job", "update")

        assert _sample("jobly_mutations_total", labels) == before + 1

    def test_record_auth_attempt(self):
        before = _sample("jobly_auth_attempts_total", {"status": "failure"})

        record_auth_attempt(success=False)

        assert _sample("jobly_auth_attempts_total", {"status": "failure"}) == before + 1

    def test_search_endpoint_counts_unfiltered(self, client, companies):
        labels = {"resource": "company", "filtered": "false"}
        before = _sample("jobly_searches_total", labels)

        client.get("/companies")

        assert _sample("jobly_searches_total", labels) == before + 1


class TestEndpointLabel:
    def test_numeric_segments_collapsed(self):
        assert _endpoint_label("/jobs/42") == "/jobs/{id}"
        assert _endpoint_label("/users/u1/jobs/7") == "/users/u1/jobs/{id}"

    def test_non_numeric_unchanged(self):
        assert _endpoint_label("/companies/c1") == "/companies/c1"
