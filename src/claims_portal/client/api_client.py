"""Thin HTTP client that talks to the expense-claims REST API."""

from __future__ import annotations

import os
from typing import Any, Optional

import requests
from loguru import logger


class ClaimsAPIClient:
    """Wrapper around ``requests`` for the claims backend.

    Parameters
    ----------
    base_url:
        Root URL of the backend (e.g. ``http://localhost:8000``).
        Falls back to the ``CLAIMS_API_BASE_URL`` env-var, then
        ``http://localhost:8000``.
    timeout:
        Request timeout in seconds.  ``None`` (the default) waits for the
        backend or the transport to give up.

    Requests are never retried.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.base_url = (
            base_url or os.getenv("CLAIMS_API_BASE_URL", "http://localhost:8000")
        ).rstrip("/")
        self.timeout = timeout

    # -----------------------------------------------------------------
    # Public helpers
    # -----------------------------------------------------------------

    def list_claims(self) -> Any:
        """``GET /api/claims``: every claim visible to the user."""
        return self._get("/api/claims")

    def get_claim(self, claim_id: str) -> Any:
        """``GET /api/claims/{id}``: one claim with all detail groups."""
        return self._get(f"/api/claims/{claim_id}")

    def cancel_claim(self, claim_id: str, *, comments: str, cancelled_by: str) -> Any:
        """``POST /api/claims/{id}/cancel``: ask the backend to cancel a claim."""
        return self._post(
            f"/api/claims/{claim_id}/cancel",
            json={"comments": comments, "cancelledBy": cancelled_by},
        )

    # -----------------------------------------------------------------
    # Internal request helpers
    # -----------------------------------------------------------------

    def _get(self, path: str) -> Any:
        return self._request("GET", path)

    def _post(self, path: str, *, json: dict[str, Any]) -> Any:
        return self._request("POST", path, json=json)

    def _request(
        self,
        method: str,
        path: str,
        **kwargs: Any,
    ) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("{method} {url}", method=method, url=url)

        try:
            resp = requests.request(
                method,
                url,
                timeout=self.timeout,
                **kwargs,
            )
            resp.raise_for_status()
            return resp.json()
        except requests.HTTPError as exc:
            response = exc.response
            status_code = response.status_code if response is not None else None
            reason = response.reason if response is not None else None
            logger.warning(
                "{method} {url} returned HTTP {status} {reason}",
                method=method,
                url=url,
                status=status_code,
                reason=reason,
            )
            raise APIError(
                f"HTTP {status_code}: {reason}",
                status_code=status_code,
                reason=reason,
                payload=_safe_json(response) if response is not None else {},
            ) from exc
        except requests.JSONDecodeError as exc:
            raise APIError(f"Invalid JSON in response from {url}: {exc}") from exc
        except requests.RequestException as exc:
            logger.warning("{method} {url} failed: {err}", method=method, url=url, err=exc)
            raise APIError(f"Request to {url} failed: {exc}") from exc


# ---------------------------------------------------------------------------
# Custom exception
# ---------------------------------------------------------------------------


class APIError(Exception):
    """Raised when the backend returns an error or is unreachable.

    ``status_code`` and ``reason`` are set only when a response arrived;
    ``payload`` holds its parsed JSON body (``{}`` when there was none).
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        reason: str | None = None,
        payload: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
        self.payload = payload or {}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _safe_json(resp: requests.Response) -> dict[str, Any]:
    """Try to parse a response body as a JSON object, returning ``{}`` on failure."""
    try:
        body = resp.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}
