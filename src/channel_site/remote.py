"""Blocking HTTP retrieval on top of a shared :class:`requests.Session`."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import requests

from channel_site import __version__
from channel_site.errors import NetworkError

logger = logging.getLogger(__name__)

USER_AGENT = f"channel-site/{__version__}"


def new_session() -> requests.Session:
    session = requests.Session()
    session.headers["User-Agent"] = USER_AGENT
    return session


def _get(session: requests.Session, url: str, timeout: float | None, stream: bool = False) -> requests.Response:
    logger.debug("GET %s", url)
    try:
        response = session.get(url, timeout=timeout, stream=stream)
    except requests.RequestException as exc:
        raise NetworkError(url, str(exc)) from exc
    try:
        response.raise_for_status()
    except requests.HTTPError as exc:
        response.close()
        raise NetworkError(url, str(exc)) from exc
    return response


def fetch_text(session: requests.Session, url: str, timeout: float | None = None) -> str:
    """Return the body of *url* decoded as UTF-8."""
    response = _get(session, url, timeout)
    try:
        return response.content.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise NetworkError(url, f"response is not valid UTF-8: {exc}") from exc


def iter_lines(session: requests.Session, url: str, timeout: float | None = None) -> Iterator[str]:
    """Stream *url* line by line.

    Nothing is requested until iteration starts, so every failure, including one
    while the body is being read, surfaces as :class:`NetworkError` from the loop.
    """
    response = _get(session, url, timeout, stream=True)
    with response:
        try:
            for raw in response.iter_lines():
                yield raw.decode("utf-8")
        except requests.RequestException as exc:
            raise NetworkError(url, f"error reading response: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise NetworkError(url, f"response is not valid UTF-8: {exc}") from exc
