import logging
from typing import Any, Dict, List, Optional

import requests


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5


class LogApiClient:
    """
    Client used by the CLI to talk to the Chad Log API.

    This client is intentionally thin:
    - No business logic
    - No retries
    - HTTP errors surface as requests exceptions
    """

    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()

    # ------------------------------------------------------------------
    # Internal HTTP helpers
    # ------------------------------------------------------------------

    def _get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{endpoint}"
        logger.debug("GET %s params=%s", url, params)
        resp = self.session.get(url, params=params, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()

    def _post(self, endpoint: str, payload: Dict[str, Any]) -> Any:
        url = f"{self.base_url}{endpoint}"
        logger.debug("POST %s", url)
        resp = self.session.post(url, json=payload, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()

    # ------------------------------------------------------------------
    # API
    # ------------------------------------------------------------------

    def send(self, message: str) -> Dict[str, Any]:
        return self._post("/logs", {"message": message})

    def list_logs(
        self,
        after: Optional[str] = None,
        contains: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        params = {
            "after": after,
            "contains": contains,
            "limit": limit,
            "offset": offset,
        }
        # Only send the filters the user actually gave.
        params = {k: v for k, v in params.items() if v is not None}
        return self._get("/logs", params=params)

    def count(self) -> int:
        return int(self._get("/logs/count")["count"])

    def ping(self) -> Dict[str, Any]:
        return self._get("/ping")
