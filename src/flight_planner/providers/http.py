from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from requests.exceptions import ConnectionError, ReadTimeout

log = logging.getLogger(__name__)


@dataclass
class HTTPClient:
    user_agent: str = "flight-planner/0.1"
    timeout_s: int = 10
    tries: int = 3
    backoff_s: float = 0.5

    def __post_init__(self) -> None:
        self.s = requests.Session()
        self.s.headers.update(
            {
                "User-Agent": self.user_agent,
                "Accept": "application/json, text/csv, text/plain;q=0.9, */*;q=0.8",
            }
        )

    @classmethod
    def from_settings(cls, settings=None) -> "HTTPClient":
        if settings is None:
            from flight_planner.config import settings
        return cls(timeout_s=settings.http_timeout_s, tries=max(1, settings.http_tries))

    def _get(self, url: str, params: Optional[Dict[str, Any]], timeout_s: Optional[int]) -> requests.Response:
        timeout = timeout_s if timeout_s is not None else self.timeout_s
        last_err: Optional[Exception] = None
        for attempt in range(self.tries):
            try:
                r = self.s.get(url, params=params, timeout=timeout)
                r.raise_for_status()
                return r
            except (ReadTimeout, ConnectionError) as e:
                last_err = e
                log.debug("GET %s failed (attempt %d/%d): %s", url, attempt + 1, self.tries, e)
                if attempt + 1 < self.tries:
                    time.sleep(self.backoff_s * (2**attempt))
        raise last_err if last_err else RuntimeError(f"HTTP GET failed: {url}")

    def get_json(self, url: str, params: Optional[Dict[str, Any]] = None, timeout_s: Optional[int] = None) -> Any:
        return self._get(url, params, timeout_s).json()

    def get_text(self, url: str, params: Optional[Dict[str, Any]] = None, timeout_s: Optional[int] = None) -> str:
        return self._get(url, params, timeout_s).text
