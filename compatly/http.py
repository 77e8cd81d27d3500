"""HTTP client layer for pycompatly."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
import json
from typing import Any
from urllib.parse import urlparse

import httpx

from ._version import __version__
from .constants import DEFAULT_TIMEOUT_SECONDS
from .exceptions import (
    ContentError,
    HttpStatusError,
    InputInvalidError,
    NetworkError,
    RequestTimeoutError,
)

_SHARED_CLIENT: ContextVar[httpx.Client | None] = ContextVar(
    "pycompatly_shared_client", default=None
)
_HTML_ACCEPT = "text/html,application/xhtml+xml"
_JSON_ACCEPT = "application/json"


def _build_headers() -> dict[str, str]:
    return {"User-Agent": f"pycompatly/{__version__}"}


@contextmanager
def use_shared_client(
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> Iterator[httpx.Client]:
    """Provide a reusable HTTP client for all fetches within a CLI run."""
    with httpx.Client(timeout=timeout, follow_redirects=True, headers=_build_headers()) as client:
        token = _SHARED_CLIENT.set(client)
        try:
            yield client
        finally:
            _SHARED_CLIENT.reset(token)


def fetch_text(
    url: str,
    *,
    accept: str = _HTML_ACCEPT,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> str:
    """GET a URL and return its body, translating transport failures."""
    shared_client = _SHARED_CLIENT.get()
    headers = {"Accept": accept}
    retry_once = True
    while True:
        try:
            if shared_client is None or timeout != DEFAULT_TIMEOUT_SECONDS:
                with httpx.Client(
                    timeout=timeout, follow_redirects=True, headers=_build_headers()
                ) as client:
                    response = client.get(url, headers=headers)
            else:
                response = shared_client.get(url, headers=headers)
        except httpx.TimeoutException as exc:
            raise RequestTimeoutError(url) from exc
        except httpx.ConnectError as exc:
            if retry_once:
                retry_once = False
                continue
            raise NetworkError(url, cause=exc.__class__.__name__) from exc
        except httpx.RequestError as exc:
            raise NetworkError(url, cause=exc.__class__.__name__) from exc

        if response.status_code != 200:
            raise HttpStatusError(response.status_code, str(response.url))

        body = response.text
        if not body.strip():
            raise ContentError(str(response.url))
        return body


def fetch_json(url: str, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> Any:
    """GET a URL and decode its JSON body."""
    raw = fetch_text(url, accept=_JSON_ACCEPT, timeout=timeout)
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ContentError(url) from exc


def validate_page_url(url: str) -> str:
    parsed = urlparse(url.strip())
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise InputInvalidError(f"Invalid URL: {url!r} (expected http:// or https://)")
    return url.strip()


def fetch_page(url: str) -> str:
    """Fetch an HTML page whose inline styles should be scanned."""
    return fetch_text(validate_page_url(url))
