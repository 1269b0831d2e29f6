"""HTTP client for the lifestyle API.

Credentials are passed explicitly into every call and never stored on the
client. When a request is rejected with 401 the client may exchange the
refresh token for new credentials and retry, as allowed by its
``RefreshPolicy``; the credentials in effect after the call are returned in
``ApiResult`` so the caller decides what to keep.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Protocol
from uuid import UUID

import httpx

_logger = logging.getLogger(__name__)

_UNAUTHORIZED = 401


@dataclass(frozen=True)
class Credentials:
    """Tokens used to authenticate a single API call."""

    access_token: str
    refresh_token: str | None = None


@dataclass(frozen=True)
class RefreshPolicy:
    """How many times a call may refresh its credentials and retry."""

    max_attempts: int = 1
    refresh_path: str = "/auth/refresh-token"


@dataclass(frozen=True)
class ApiResult:
    """Response payload plus the credentials that produced it."""

    data: object
    credentials: Credentials


class ApiClientError(Exception):
    """Raised for failed API calls; ``status`` is 0 for transport errors."""

    def __init__(self, message: str, status: int, data: object = None) -> None:
        super().__init__(message)
        self.status = status
        self.data = data


class LifestyleApiClient(Protocol):
    """Interface for lifestyle API interactions."""

    async def get_plan_compliance(  # noqa: PLR0913
        self,
        credentials: Credentials,
        kind: str,
        plan_id: UUID,
        user_id: UUID,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> ApiResult:
        """Fetch a plan compliance report."""


@dataclass
class HttpxLifestyleApiClient(LifestyleApiClient):
    """HTTPX-backed lifestyle API client."""

    base_url: str
    http_client: httpx.AsyncClient
    refresh_policy: RefreshPolicy = field(default_factory=RefreshPolicy)
    timeout: float = 30

    @classmethod
    def create(
        cls, base_url: str, refresh_policy: RefreshPolicy | None = None
    ) -> "HttpxLifestyleApiClient":
        """Create a client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            refresh_policy=refresh_policy or RefreshPolicy(),
        )

    async def request(  # noqa: PLR0913
        self,
        method: str,
        path: str,
        credentials: Credentials,
        *,
        params: dict[str, object] | None = None,
        json: object = None,
    ) -> ApiResult:
        """Send an authenticated request, refreshing credentials on 401."""
        attempt = 0
        while True:
            response = await self._send(
                method, path, credentials, params=params, json=json
            )
            if response.status_code != _UNAUTHORIZED:
                return ApiResult(data=_payload(response), credentials=credentials)
            if (
                credentials.refresh_token is None
                or attempt >= self.refresh_policy.max_attempts
            ):
                _raise_for_response(response)
            attempt += 1
            _logger.info(
                "Refreshing credentials (attempt %s/%s) for %s %s",
                attempt,
                self.refresh_policy.max_attempts,
                method,
                path,
            )
            credentials = await self.refresh(credentials)

    async def refresh(self, credentials: Credentials) -> Credentials:
        """Exchange a refresh token for new credentials."""
        response = await self._post_unauthenticated(
            self.refresh_policy.refresh_path,
            {"refreshToken": credentials.refresh_token},
        )
        payload = _payload(response)
        if not isinstance(payload, dict) or not payload.get("accessToken"):
            raise ApiClientError("Refresh response missing accessToken", 401, payload)
        return Credentials(
            access_token=str(payload["accessToken"]),
            refresh_token=str(payload.get("refreshToken") or credentials.refresh_token),
        )

    async def get_plan_compliance(  # noqa: PLR0913
        self,
        credentials: Credentials,
        kind: str,
        plan_id: UUID,
        user_id: UUID,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> ApiResult:
        """Fetch a plan compliance report; ``kind`` is ``diet`` or ``exercise``."""
        params: dict[str, object] = {"userId": str(user_id)}
        if start_date:
            params["startDate"] = start_date.isoformat()
        if end_date:
            params["endDate"] = end_date.isoformat()
        return await self.request(
            "GET",
            f"/lifestyle/{kind}-plans/{plan_id}/compliance",
            credentials,
            params=params,
        )

    async def list_diet_logs(
        self, credentials: Credentials, user_id: UUID, day: date | None = None
    ) -> ApiResult:
        """List diet logs, optionally for one date."""
        return await self.request(
            "GET", "/lifestyle/diet", credentials, params=_log_params(user_id, day)
        )

    async def create_diet_log(
        self, credentials: Credentials, payload: dict[str, object]
    ) -> ApiResult:
        """Create a diet log from a camelCase payload."""
        return await self.request("POST", "/lifestyle/diet", credentials, json=payload)

    async def list_exercise_logs(
        self, credentials: Credentials, user_id: UUID, day: date | None = None
    ) -> ApiResult:
        """List exercise logs, optionally for one date."""
        return await self.request(
            "GET", "/lifestyle/exercise", credentials, params=_log_params(user_id, day)
        )

    async def create_exercise_log(
        self, credentials: Credentials, payload: dict[str, object]
    ) -> ApiResult:
        """Create an exercise log from a camelCase payload."""
        return await self.request(
            "POST", "/lifestyle/exercise", credentials, json=payload
        )

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _send(  # noqa: PLR0913
        self,
        method: str,
        path: str,
        credentials: Credentials,
        *,
        params: dict[str, object] | None,
        json: object,
    ) -> httpx.Response:
        headers = {
            "Accept": "application/json",
            "Authorization": f"Bearer {credentials.access_token}",
        }
        try:
            return await self.http_client.request(
                method,
                f"{self.base_url}{path}",
                params=params,
                json=json,
                headers=headers,
                timeout=self.timeout,
            )
        except httpx.HTTPError as exc:
            raise ApiClientError(f"Network error: {exc}", 0) from exc

    async def _post_unauthenticated(
        self, path: str, body: dict[str, object]
    ) -> httpx.Response:
        try:
            response = await self.http_client.post(
                f"{self.base_url}{path}",
                json=body,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        except httpx.HTTPError as exc:
            raise ApiClientError(f"Network error: {exc}", 0) from exc
        if response.is_error:
            _raise_for_response(response)
        return response


def _log_params(user_id: UUID, day: date | None) -> dict[str, object]:
    params: dict[str, object] = {"userId": str(user_id)}
    if day:
        params["date"] = day.isoformat()
    return params


def _payload(response: httpx.Response) -> object:
    if response.is_error:
        _raise_for_response(response)
    if "application/json" in response.headers.get("content-type", ""):
        return response.json()
    return response.text


def _raise_for_response(response: httpx.Response) -> None:
    data: object
    if "application/json" in response.headers.get("content-type", ""):
        data = response.json()
    else:
        data = response.text
    message = f"Request failed with status {response.status_code}"
    if isinstance(data, dict):
        for key in ("message", "error", "detail"):
            value = data.get(key)
            if isinstance(value, str) and value:
                message = value
                break
    raise ApiClientError(message, response.status_code, data)
