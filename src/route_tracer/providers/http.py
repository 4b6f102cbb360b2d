from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from requests.exceptions import RequestException

from route_tracer.errors import NetworkError

log = logging.getLogger(__name__)


@dataclass
class HTTPClient:
    """
    Shared ``requests.Session`` with a bounded timeout.

    Makes exactly one attempt per call. Transport failures come back as
    NetworkError; HTTP status handling is left to the caller.
    """

    user_agent: str
    timeout_s: float = 10.0

    def __post_init__(self) -> None:
        self.s = requests.Session()
        self.s.headers.update(
            {
                "User-Agent": self.user_agent,
                "Accept": "application/geo+json, application/json;q=0.9, */*;q=0.8",
            }
        )

    def get(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        timeout_s: Optional[float] = None,
    ) -> requests.Response:
        timeout = timeout_s if timeout_s is not None else self.timeout_s
        try:
            return self.s.get(url, params=params, timeout=timeout)
        except RequestException as e:
            # str(e) can echo the full query string, api_key included
            log.warning("GET %s failed: %s", url, type(e).__name__)
            raise NetworkError(f"{type(e).__name__} while calling {url}") from e

    def close(self) -> None:
        self.s.close()
