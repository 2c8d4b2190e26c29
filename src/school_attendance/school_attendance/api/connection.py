from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import requests


@dataclass
class ApiConfig:
    base_url: str
    timeout: Optional[float] = None


class ApiConnection:
    """Singleton-like holder for the HTTP session to the attendance API.

    Note: One pooled requests.Session is shared by every repository in the process.
    """

    _instance: Optional["ApiConnection"] = None

    def __init__(self, config: ApiConfig, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session

    @classmethod
    def get_instance(cls, config: ApiConfig) -> "ApiConnection":
        if cls._instance is None or cls._instance._config != config:
            cls._instance = ApiConnection(config)
        return cls._instance

    @property
    def timeout(self) -> Optional[float]:
        return self._config.timeout

    def url(self, path: str) -> str:
        return f"{self._config.base_url.rstrip('/')}/{path.lstrip('/')}"

    def session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update({"Content-Type": "application/json", "Accept": "application/json"})
        return self._session
