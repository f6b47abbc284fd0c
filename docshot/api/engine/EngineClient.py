"""Minimal client for the Operaton engine REST API."""

from typing import Any

import requests

from ..config.EngineConfig import EngineConfig


class EngineClient:
    """Authenticated requests session bound to one engine.

    Errors are not caught here; callers decide how a failed call is reported.
    """

    def __init__(self, config: EngineConfig, session: requests.Session | None = None):
        self.config = config
        self.session = session if session is not None else requests.Session()
        self.session.auth = (config.username, config.password)

    def __enter__(self) -> "EngineClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self) -> None:
        self.session.close()

    def _get(self, url: str, **kwargs: Any) -> requests.Response:
        response = self.session.get(url, timeout=self.config.timeout_secs, **kwargs)
        response.raise_for_status()
        return response

    def engines(self) -> list[str]:
        """Names of the process engines served by the REST API.

        Raises:
            ValueError: If the body is not a list of engine objects
        """
        data = self._get(f"{self.config.rest_url}/engine").json()
        if not isinstance(data, list) or not all(isinstance(engine, dict) for engine in data):
            raise ValueError(f"Unexpected /engine response: {data!r}")
        return [engine.get("name", "") for engine in data]

    def version(self) -> str:
        data = self._get(f"{self.config.rest_url}/version").json()
        if not isinstance(data, dict):
            raise ValueError(f"Unexpected /version response: {data!r}")
        return data.get("version") or "unknown"

    def count(self, endpoint: str, params: dict[str, Any] | None = None) -> int:
        """Result of ``GET <endpoint>/count``.

        Raises:
            ValueError: If the body has no integer ``count``
        """
        data = self._get(f"{self.config.rest_url}{endpoint}/count", params=params or {}).json()
        value = data.get("count") if isinstance(data, dict) else None
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"Unexpected {endpoint}/count response: {data!r}")
        return value

    def webapp_status(self, app: str) -> int:
        """HTTP status of a web app's landing page.

        Sent without the REST credentials; redirects are followed.
        """
        url = f"{self.config.web_url}/operaton/app/{app}/default/"
        return requests.get(url, timeout=self.config.timeout_secs).status_code
