"""PokeAPI HTTP client.

Calls the PokeAPI REST endpoints over HTTP with retry/backoff and returns the
decoded JSON payloads.
"""

from __future__ import annotations

import random
import time
from typing import Any, Optional

import requests

from PokeCatalog.config.api import DEFAULT_BASE_URL
from PokeCatalog.utils.log import log

DEFAULT_TIMEOUT = 30.0
MAX_ATTEMPTS = 4
BASE_PAUSE = 0.5
MAX_SLEEP = 10.0
TOO_MANY_REQUESTS_BASE_PAUSE = 2.0
TOO_MANY_REQUESTS_MAX_SLEEP = 60.0

RETRYABLE_STATUS = {429, 500, 502, 503, 504}

HEADERS = {
    "User-Agent": "poke-catalog/0.1",
    "Accept": "application/json",
}


class PokeApiClient:
    """Low-level HTTP client for PokeAPI.

    Responsible only for network requests; mapping payloads to catalog records
    happens in the parser module. A single ``requests.Session`` is shared by
    the worker threads of a bulk load.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        max_attempts: int = MAX_ATTEMPTS,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_attempts = max_attempts
        self._session = requests.Session()

    def close(self) -> None:
        """Close the underlying HTTP session and release pooled connections."""
        self._session.close()

    def __enter__(self) -> PokeApiClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def fetch_pokemon_list(self, *, limit: int) -> dict[str, Any]:
        """Fetch the paginated name/url index (``/pokemon?limit=N``)."""
        return self.get_json(f"{self.base_url}/pokemon", params={"limit": str(limit)})

    def fetch_ability(self, name: str) -> dict[str, Any]:
        """Fetch one ability payload (``/ability/{name}``)."""
        return self.get_json(f"{self.base_url}/ability/{name}")

    def get_json(
        self,
        url: str,
        *,
        params: Optional[dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> dict[str, Any]:
        """GET ``url`` and decode the JSON body.

        Absolute URLs from API payloads (pokemon/species links) are used as-is.

        Raises:
            requests.RequestException: Last request error after all retries.
            ValueError: If the body is not a JSON object.
        """
        resp = self._get_with_retry(url, params=params, timeout=timeout)
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, dict):
            raise ValueError(f"Unexpected payload from {url}: expected JSON object")
        return data

    def _get_with_retry(
        self,
        url: str,
        *,
        params: Optional[dict[str, str]],
        timeout: Optional[float],
    ) -> requests.Response:
        """Issue GET request with retry/backoff.

        Retries on timeouts/connection errors and selected HTTP status codes.

        Raises:
            requests.RequestException: Last observed error when all attempts failed.
        """
        timeout = timeout or self.timeout
        last_err: Exception | None = None

        for attempt in range(1, self.max_attempts + 1):
            last_status_code: int | None = None
            try:
                log.debug("PokeAPI request attempt %d/%d to %s", attempt, self.max_attempts, url)
                resp = self._session.get(url, params=params, headers=HEADERS, timeout=timeout)
                if resp.status_code in RETRYABLE_STATUS:
                    raise requests.exceptions.HTTPError(f"HTTP {resp.status_code}", response=resp)
                return resp
            except (requests.exceptions.Timeout, requests.exceptions.ConnectionError) as e:
                last_err = e
            except requests.exceptions.HTTPError as e:
                last_err = e
                st = getattr(e.response, "status_code", None)
                last_status_code = st if isinstance(st, int) else None

            if attempt < self.max_attempts:
                log.debug("PokeAPI retrying %s after attempt %d (error=%s)", url, attempt, last_err)
                self._sleep_backoff(attempt, status_code=last_status_code)

        assert last_err is not None
        raise last_err

    @staticmethod
    def _sleep_backoff(attempt: int, *, status_code: int | None = None) -> None:
        if status_code == 429:
            delay = min(TOO_MANY_REQUESTS_BASE_PAUSE * (2 ** (attempt - 1)), TOO_MANY_REQUESTS_MAX_SLEEP)
            time.sleep(delay)
            return

        delay = min(BASE_PAUSE * (2 ** (attempt - 1)) + random.uniform(0, 0.25), MAX_SLEEP)
        time.sleep(delay)
