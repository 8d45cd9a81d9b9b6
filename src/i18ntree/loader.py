# src/i18ntree/loader.py
"""
Loading translation stores from files and HTTP endpoints.

Configuration (``config.ini``)::

    [loading]
    encoding = utf-8
    expand_lists = true

    [fetch]
    timeout_seconds = 30
    connect_timeout_seconds = 10
"""
import logging
from pathlib import Path
from typing import Optional, Tuple, Union

import requests

from .config import config
from .decoder import DecodeError, decode_json
from .translations import Translations

__all__ = [
    "FetchError",
    "load_file",
    "fetch",
    "load_or_empty",
]

logger = logging.getLogger(__name__)


class FetchError(RuntimeError):
    """
    Raised when translations cannot be retrieved over HTTP.

    Attributes:
        url (str): Requested URL
        status_code (Optional[int]): HTTP status, if a response was received
    """

    def __init__(self, message: str, url: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


def _default_timeout() -> Tuple[float, float]:
    return (
        config.get("fetch", "connect_timeout_seconds", 10.0),
        config.get("fetch", "timeout_seconds", 30.0),
    )


def load_file(path: Union[str, Path], *, encoding: Optional[str] = None) -> Translations:
    """
    Read and decode a JSON translation file.

    Args:
        path: File to read.
        encoding: Text encoding; defaults to ``[loading] encoding``.

    Returns:
        The decoded store.

    Raises:
        DecodeError: If the file is not a valid translation document.
        OSError: If the file cannot be read.
    """
    path = Path(path)
    encoding = encoding or config.get("loading", "encoding", "utf-8")
    raw = path.read_bytes()
    try:
        text = raw.decode(encoding)
    except UnicodeDecodeError as exc:
        raise DecodeError(f"Malformed JSON: invalid {encoding} byte at position {exc.start}") from exc
    store = Translations(decode_json(text))
    logger.info("Loaded %d translation key(s) from %s", len(store), path)
    return store


def fetch(
    url: str,
    *,
    timeout: Optional[Union[float, Tuple[float, float]]] = None,
    session: Optional[requests.Session] = None,
) -> Translations:
    """
    Fetch a JSON translation document over HTTP GET.

    Args:
        url: Document URL.
        timeout: ``requests`` timeout; defaults to ``(connect, read)`` from
                 the ``[fetch]`` config section.
        session: Optional session to reuse connections.

    Returns:
        The decoded store.

    Raises:
        FetchError: On transport errors or a non-2xx response.
        DecodeError: If the body is not a valid translation document.
    """
    getter = session.get if session is not None else requests.get
    try:
        resp = getter(url, timeout=timeout if timeout is not None else _default_timeout())
    except requests.Timeout as exc:
        raise FetchError(f"Timed out fetching translations from {url}", url) from exc
    except requests.RequestException as exc:
        raise FetchError(f"Cannot fetch translations from {url}: {exc}", url) from exc

    if not 200 <= resp.status_code < 300:
        raise FetchError(
            f"Fetching translations from {url} returned HTTP {resp.status_code}",
            url,
            status_code=resp.status_code,
        )

    store = Translations(decode_json(resp.content))
    logger.info("Fetched %d translation key(s) from %s", len(store), url)
    return store


def load_or_empty(source: Union[str, Path]) -> Translations:
    """
    Load *source* (a path or an ``http(s)`` URL), falling back to an empty store.

    Failures are logged at ERROR level rather than raised, so a broken
    translation file degrades to showing keys.
    """
    text = str(source)
    try:
        if text.startswith(("http://", "https://")):
            return fetch(text)
        return load_file(source)
    except (DecodeError, FetchError, OSError) as exc:
        logger.error("Failed to load translations from %s: %s", text, exc)
        return Translations.empty()
