"""Small HTTP request helper."""

from __future__ import annotations

import requests

from announce.logger import Logger

_log = Logger("HELPER")

REQUEST_TIMEOUT = 30.0


def create_http_request(
    url: str,
    method: str = "GET",
    token: str = "",
    api_key: str = "",
    body: str = "",
) -> tuple[int, bytes]:
    """Send a JSON request and return the status code and the raw body.

    Any status code is returned as is; network failures raise
    :class:`requests.RequestException`.
    """
    headers = {"Content-Type": "application/json"}
    if token:
        headers["Authorization"] = "Bearer " + token
    if api_key:
        _log.log("API KEY : ", api_key)
        headers["X-Api-Key"] = api_key

    _log.log("Resp Body : ", body)

    response = requests.request(
        method,
        url,
        data=body.encode("utf-8"),
        headers=headers,
        timeout=REQUEST_TIMEOUT,
    )
    return response.status_code, response.content