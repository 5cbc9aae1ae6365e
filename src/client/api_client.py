# This file implements the HTTP client for the store-location API.
# It exists so scripts and downstream tools can call stable endpoints without embedding request details.
# The client unwraps response envelopes and converts failures into two clear exception types.
# Client errors keep the server's error payload so callers can see which field was rejected.

from __future__ import annotations

from typing import Any

import requests


class ApiUnavailableError(RuntimeError):
    """Raised when the API cannot be reached or responds with server errors."""


class StoreLocatorRequestError(ValueError):
    """Raised when the API rejects a request with a 4xx status."""

    def __init__(self, *, status_code: int, payload: dict[str, Any], url: str) -> None:
        self.status_code = status_code
        self.payload = payload
        self.error_code = payload.get("error_code")
        self.field = payload.get("field")
        message = payload.get("message") or f"Request rejected with status {status_code}"
        super().__init__(f"{message} ({url})")


class StoreLocatorApiClient:
    def __init__(
        self,
        *,
        base_url: str,
        api_version_path: str = "/api/v1",
        timeout_seconds: int = 30,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_version_path = "/" + api_version_path.strip("/")
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    def health(self) -> dict[str, Any]:
        return self._request_json("GET", "/health")

    def get_examples(self) -> list[dict[str, Any]]:
        payload = self._request_json("GET", f"{self.api_version_path}/examples")
        return list(payload.get("data", []))

    def find_store_locations(self, *, k: int, grid: list[list[int]]) -> dict[str, Any]:
        payload = self._request_json(
            "POST",
            f"{self.api_version_path}/store-locations",
            json_body={"k": k, "grid": grid},
        )
        data = payload.get("data")
        if not isinstance(data, dict):
            raise ApiUnavailableError("Store-location response did not contain a data object")
        return dict(data)

    def _request_json(
        self,
        method: str,
        path: str,
        json_body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(
                method, url, json=json_body, timeout=self.timeout_seconds
            )
        except requests.RequestException as exc:
            raise ApiUnavailableError(f"API request failed for {url}: {exc}") from exc

        if response.status_code >= 500:
            raise ApiUnavailableError(
                f"API request failed with status {response.status_code} for {url}"
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise ApiUnavailableError(f"API did not return valid JSON for {url}") from exc

        if not isinstance(payload, dict):
            raise ApiUnavailableError(f"Unexpected payload shape from {url}")
        if response.status_code >= 400:
            raise StoreLocatorRequestError(
                status_code=response.status_code, payload=payload, url=url
            )
        return payload
