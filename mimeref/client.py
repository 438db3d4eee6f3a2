"""HTTP client for a remote mimeref lookup server."""
from __future__ import annotations

from typing import Any

import requests
from requests.adapters import HTTPAdapter

from mimeref.config import get_server_url


def _make_session() -> requests.Session:
    session = requests.Session()
    adapter = HTTPAdapter()
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


# Module-level singleton — reuses TCP connections across all requests in a process
_session: requests.Session | None = None


def _get_session() -> requests.Session:
    global _session
    if _session is None:
        _session = _make_session()
    return _session


def api_url(path: str) -> str:
    """Construct full API URL from config server URL + path."""
    base = get_server_url().rstrip("/")
    return f"{base}{path}"


def get(path: str, params: dict | None = None) -> Any:
    resp = _get_session().get(api_url(path), params=params, timeout=(5, 30))
    resp.raise_for_status()
    return resp.json()


def lookup_type(mime_type: str) -> dict[str, Any]:
    return get("/type", {"q": mime_type})


def lookup_path(path: str) -> dict[str, Any]:
    return get("/path", {"q": path})
