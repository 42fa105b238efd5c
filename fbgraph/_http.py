"""Thin HTTP client wrapping requests.Session with OAuth header, error classification, and retry."""

from __future__ import annotations

import logging
import time
from typing import Any, NoReturn

import requests

from ._classifier import classify
from ._exceptions import GraphAPIError, NetworkError
from ._failures import ClassifiedFailure, Uncategorized
from ._types import RawResponse

logger = logging.getLogger(__name__)

# Retry config
_INITIAL_BACKOFF = 0.5  # seconds
_RETRYABLE_STATUS = {429, 500, 502, 503, 504}


def _is_retryable(failure: ClassifiedFailure, status_code: int) -> bool:
    # Domain errors are permanent even when the API reports them as 5xx.
    return isinstance(failure, Uncategorized) and status_code in _RETRYABLE_STATUS


def _retry_delay(resp: requests.Response, attempt: int) -> float:
    retry_after = resp.headers.get("Retry-After")
    if retry_after and resp.status_code == 429:
        try:
            return float(retry_after)
        except ValueError:
            logger.debug("Unparseable Retry-After header: %s", retry_after)
    return _INITIAL_BACKOFF * (2**attempt)


class HTTPClient:
    """Minimal Graph API client: OAuth header, classified errors, automatic retry."""

    def __init__(
        self,
        base_url: str,
        access_token: str | None = None,
        timeout: int = 30,
        max_retries: int = 3,
    ):
        self._session = requests.Session()
        if access_token:
            self._session.headers["Authorization"] = f"OAuth {access_token}"
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._max_retries = max(1, max_retries)
        self.authorized = bool(access_token)

    def _raise_for_failure(
        self, failure: ClassifiedFailure, resp: requests.Response, method: str, url: str
    ) -> NoReturn:
        resp.close()
        logger.debug("%s %s failed: %s (%s)", method, url, failure.kind.value, failure.message)
        raise GraphAPIError(failure, status_code=resp.status_code, method=method, path=url)

    def _request_with_retry(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """Send request, classify the response, and retry transient failures."""
        for attempt in range(self._max_retries):
            last_attempt = attempt == self._max_retries - 1
            try:
                resp = self._session.request(method, url, timeout=self._timeout, **kwargs)
            except (requests.Timeout, requests.ConnectionError) as e:
                logger.warning(
                    "Request failed (attempt %d/%d): %s", attempt + 1, self._max_retries, e
                )
                if last_attempt:
                    raise NetworkError(str(e), method=method, path=url) from e
                time.sleep(_INITIAL_BACKOFF * (2**attempt))
                continue

            failure = classify(RawResponse.from_requests(resp), authorized=self.authorized)
            if failure is None:
                return resp

            if last_attempt or not _is_retryable(failure, resp.status_code):
                self._raise_for_failure(failure, resp, method, url)

            delay = _retry_delay(resp, attempt)
            resp.close()
            logger.debug(
                "Retrying %s %s (attempt %d, delay %.1fs)", method, url, attempt + 1, delay
            )
            time.sleep(delay)

        raise NetworkError("Max retries exceeded", method=method, path=url)

    def request(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        """Send request and raise GraphAPIError on a classified failure."""
        return self._request_with_retry(method, f"{self._base_url}/{path.lstrip('/')}", **kwargs)

    def _decode(self, resp: requests.Response) -> Any:
        try:
            return resp.json()
        except ValueError:
            logger.debug("Invalid JSON in response: %s", resp.text[:200] if resp.text else "empty")
            failure = Uncategorized(
                "Invalid JSON in response", status_code=resp.status_code, body=resp.text
            )
            self._raise_for_failure(failure, resp, resp.request.method or "", resp.url)

    def get_json(self, path: str, **params: Any) -> Any:
        return self._decode(self.request("GET", path, params=params or None))

    def post(self, path: str, data: dict[str, Any] | None = None) -> requests.Response:
        return self.request("POST", path, data=data)

    def post_json(self, path: str, data: dict[str, Any] | None = None) -> Any:
        return self._decode(self.post(path, data=data))

    def close(self) -> None:
        self._session.close()
