"""
Shared HTTP client for the Open-Meteo lookups.

Provides a pre-configured ``requests.Session``.  Lookups are single-shot:
the mounted adapter has retries disabled, and a failed request surfaces
immediately to the caller.  A default timeout is injected only when one is
configured; otherwise the transport default applies.

Usage::

    from city_weather.services.http import session

    resp = session.get("https://api.example.com/v1/data")
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from city_weather import __version__
from city_weather.config import get_settings

#: No retries, no backoff.  ``raise_on_status`` is left to ``resp.raise_for_status()``.
NO_RETRY = Retry(total=0, raise_on_status=False)

USER_AGENT = f"city-weather/{__version__}"


def create_session(
    retry: Retry | None = None,
    timeout: float | None = None,
) -> requests.Session:
    """
    Build a ``requests.Session`` with the adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``NO_RETRY``).
        timeout: Default timeout applied to every request.  ``None`` keeps
            the transport default.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or NO_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    if timeout is None:
        return s

    # Inject the default timeout so callers don't need to pass ``timeout=``.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = timeout
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session; import and use directly.
session: requests.Session = create_session(timeout=get_settings().http_timeout)
