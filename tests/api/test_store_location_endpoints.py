# This file tests the store-location query and worked-examples endpoints.
# It exists to confirm the query route exposes a stable machine-readable contract.
# The tests cover success envelopes, field-tagged validation errors, and missing-field handling.
# Unexpected failures are checked for the generic internal error shape.

from __future__ import annotations

from tests.api.support import ExplodingStoreLocationService, api_test_client, build_test_config

ENDPOINT = "/api/v1/store-locations"
EXAMPLE_GRID = [[0, 0, 0, 0], [0, 0, 1, 0], [1, 0, 0, 1]]


def test_query_returns_locations_in_envelope() -> None:
    with api_test_client() as client:
        response = client.post(ENDPOINT, json={"k": 2, "grid": EXAMPLE_GRID})

    assert response.status_code == 200
    payload = response.json()
    assert payload["api_version"] == "v1"
    assert payload["request_id"]
    data = payload["data"]
    assert data["count"] == 2
    assert data["locations"] == [{"row": 2, "col": 1}, {"row": 2, "col": 2}]
    assert data["elapsed"] >= 0


def test_query_accepts_legacy_matrix_field() -> None:
    with api_test_client() as client:
        response = client.post(ENDPOINT, json={"k": 1, "matrix": [[0, 1], [0, 0]]})

    assert response.status_code == 200
    assert response.json()["data"]["count"] == 2


def test_larger_grid_is_solved_without_artificial_delay() -> None:
    grid = [[0] * 20 for _ in range(20)]
    grid[5][5] = 1
    grid[15][15] = 1
    with api_test_client() as client:
        response = client.post(ENDPOINT, json={"k": 10, "grid": grid})

    assert response.status_code == 200
    assert response.json()["data"]["count"] > 0


def test_invalid_k_returns_field_tagged_validation_error() -> None:
    with api_test_client() as client:
        response = client.post(ENDPOINT, json={"k": 0, "grid": [[0, 1], [1, 0]]})

    assert response.status_code == 400
    payload = response.json()
    assert payload["kind"] == "ValidationError"
    assert payload["error_code"] == "VALIDATION_ERROR"
    assert payload["field"] == "k"
    assert payload["message"]
    assert payload["request_id"]


def test_house_free_grid_returns_grid_validation_error() -> None:
    with api_test_client() as client:
        response = client.post(ENDPOINT, json={"k": 2, "grid": [[0, 0], [0, 0]]})

    assert response.status_code == 400
    assert response.json()["field"] == "grid"


def test_jagged_grid_returns_grid_validation_error() -> None:
    with api_test_client() as client:
        response = client.post(ENDPOINT, json={"k": 2, "grid": [[0, 1], [1]]})

    assert response.status_code == 400
    assert response.json()["kind"] == "ValidationError"
    assert response.json()["field"] == "grid"


def test_missing_fields_are_rejected_before_solving() -> None:
    with api_test_client() as client:
        empty_body = client.post(ENDPOINT, json={})
        missing_grid = client.post(ENDPOINT, json={"k": 2})
        no_body = client.post(ENDPOINT)

    assert empty_body.status_code == 400
    assert empty_body.json()["error_code"] == "MISSING_REQUIRED_FIELDS"
    assert empty_body.json()["details"] == {"missing": ["k", "grid"]}
    assert missing_grid.status_code == 400
    assert missing_grid.json()["details"] == {"missing": ["grid"]}
    assert no_body.status_code == 400
    assert no_body.json()["error_code"] == "MISSING_REQUIRED_FIELDS"


def test_malformed_json_body_returns_request_validation_error() -> None:
    with api_test_client() as client:
        response = client.post(
            ENDPOINT,
            content=b"{not json",
            headers={"content-type": "application/json"},
        )

    assert response.status_code == 422
    assert response.json()["error_code"] == "VALIDATION_ERROR"


def test_workload_limit_returns_413() -> None:
    config = build_test_config(max_pair_checks=5)
    with api_test_client(config=config) as client:
        response = client.post(ENDPOINT, json={"k": 2, "grid": EXAMPLE_GRID})

    assert response.status_code == 413
    payload = response.json()
    assert payload["error_code"] == "WORKLOAD_TOO_LARGE"
    assert payload["details"] == {"pair_checks": 27, "max_pair_checks": 5}


def test_unexpected_failure_returns_internal_error() -> None:
    with api_test_client(
        store_location_service=ExplodingStoreLocationService(),
        raise_server_exceptions=False,
    ) as client:
        response = client.post(ENDPOINT, json={"k": 2, "grid": EXAMPLE_GRID})

    assert response.status_code == 500
    payload = response.json()
    assert payload["kind"] == "InternalError"
    assert payload["error_code"] == "INTERNAL_SERVER_ERROR"
    assert "simulated" not in payload["message"]
    assert payload.get("field") is None


def test_examples_endpoint_lists_worked_examples() -> None:
    with api_test_client() as client:
        response = client.get("/api/v1/examples")

    assert response.status_code == 200
    data = response.json()["data"]
    assert len(data) == 5
    assert data[0]["request"]["k"] == 2
    assert data[2]["expected_result"]["count"] == 8


def test_unknown_route_returns_not_found_payload() -> None:
    with api_test_client() as client:
        response = client.get("/non-existent-endpoint")

    assert response.status_code == 404
    assert response.json()["error_code"] == "NOT_FOUND"
