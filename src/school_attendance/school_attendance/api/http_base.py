from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, TypeVar

import requests

from ..core.exceptions import ApiStatusError, ApiTransportError
from .connection import ApiConnection

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _send(
    conn: ApiConnection,
    method: str,
    path: str,
    *,
    json: Any = None,
    params: Optional[Dict[str, Any]] = None,
) -> requests.Response:
    url = conn.url(path)
    logger.debug("%s %s", method, url)
    try:
        resp = conn.session().request(method, url, json=json, params=params, timeout=conn.timeout)
    except requests.RequestException as e:
        logger.error("Error calling %s %s: %s", method, url, e)
        raise ApiTransportError(f"Could not reach the attendance API ({method} {path})") from e

    if not 200 <= resp.status_code < 300:
        logger.warning("%s %s returned HTTP %s: %s", method, url, resp.status_code, resp.text[:200])
        raise ApiStatusError(f"The attendance API rejected {method} {path} (HTTP {resp.status_code})", resp.status_code)
    return resp


def _unreadable(method: str, path: str, resp: requests.Response, error: Exception) -> ApiStatusError:
    logger.error("Unreadable response from %s %s: %s", method, path, error)
    return ApiStatusError(f"The attendance API sent an unreadable response ({method} {path})", resp.status_code)


def api_request(
    conn: ApiConnection,
    method: str,
    path: str,
    *,
    json: Any = None,
    params: Optional[Dict[str, Any]] = None,
    expect_body: bool = True,
) -> Any:
    """Send one JSON request and return the decoded body (None when empty).

    Raises ApiTransportError when the API cannot be reached and ApiStatusError
    for any status outside the 2xx range. With expect_body=False any 2xx is
    success and the body is not read.
    """

    resp = _send(conn, method, path, json=json, params=params)
    if not expect_body or not resp.content:
        return None
    try:
        return resp.json()
    except ValueError as e:
        raise _unreadable(method, path, resp, e) from e


def fetch_list(
    conn: ApiConnection,
    path: str,
    row_mapper: Callable[[Dict[str, Any]], T],
    *,
    params: Optional[Dict[str, Any]] = None,
) -> List[T]:
    """GET a collection and map every row; a null body counts as an empty list.

    A body that is not a list, or a row that cannot be mapped, raises
    ApiStatusError so callers only ever see ApiError.
    """

    resp = _send(conn, "GET", path, params=params)
    try:
        data = resp.json() if resp.content else None
        if data is None:
            return []
        if not isinstance(data, list):
            raise TypeError(f"expected a list, got {type(data).__name__}")
        return [row_mapper(row) for row in data]
    except (KeyError, TypeError, ValueError) as e:
        raise _unreadable("GET", path, resp, e) from e


def optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def optional_id(value: Any) -> Optional[int]:
    """The API sends 0 for an unset foreign key."""
    if value in (None, ""):
        return None
    value = int(value)
    return value if value > 0 else None
