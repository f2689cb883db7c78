"""
HTTP wrapper the client views use to talk to the job endpoints.

Built on httpx. Any non-2xx response or transport failure is raised as
ApiError carrying the server's message when one was sent.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """A call to the job API failed."""

    def __init__(self, message: Optional[str], status_code: Optional[int] = None):
        super().__init__(message or "Request failed")
        self.message = message
        self.status_code = status_code


def _server_message(response: httpx.Response) -> Optional[str]:
    """Pull a human-readable message out of an error body, if there is one."""
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    for key in ("detail", "message"):
        if isinstance(body.get(key), str):
            return body[key]
    return None


class JobsApiClient:
    """
    Client for the /job endpoints.

    Args:
        base_url: Server root, e.g. "http://localhost:8000"
        token: Bearer access token from /auth/login
        http_client: Pre-built httpx.Client to reuse (base_url is ignored)
        api_prefix: Mount point of the job router
        timeout: Request timeout in seconds
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        token: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
        api_prefix: str = "/api/v1/job",
        timeout: float = 10.0,
    ):
        self._client = http_client or httpx.Client(base_url=base_url, timeout=timeout)
        self._owns_client = http_client is None
        self.token = token
        self.api_prefix = api_prefix.rstrip("/")

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "JobsApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _request(self, method: str, path: str, **kwargs) -> Any:
        headers = kwargs.pop("headers", {})
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        try:
            response = self._client.request(method, f"{self.api_prefix}{path}", headers=headers, **kwargs)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise ApiError(None) from e

        if response.is_error:
            raise ApiError(_server_message(response), response.status_code)
        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"{method} {path} returned a non-JSON body")
            raise ApiError(None, response.status_code) from e

    def create_job(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/create-job", json=fields)

    def get_jobs(self, **filters: Optional[str]) -> List[Dict[str, Any]]:
        params = {key: value for key, value in filters.items() if value is not None}
        return self._request("GET", "/get-jobs", params=params)

    def update_job(self, job_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PATCH", f"/update-job/{job_id}", json=fields)

    def edit_job(self, job_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", f"/edit-job/{job_id}", json=fields)

    def delete_job(self, job_id: str) -> Dict[str, Any]:
        return self._request("DELETE", f"/delete-job/{job_id}")

    def job_stats(self) -> Dict[str, Any]:
        return self._request("GET", "/job-stats")
