"""
Shared HTTP client with a default timeout.

Provides a pre-configured ``requests.Session`` used by every datasource and by
the front-end dashboard client. Every request gets a bounded timeout even
when the caller forgets to pass one. Retries are off by default so that one
logical fetch maps to one outbound request; pass ``retries`` to enable
urllib3's exponential backoff for transient errors (502/503/504, 429).

Usage::

    from tidepool.services.http import session

    resp = session.get("https://api.obis.org/v3/statistics")
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from tidepool import __version__

DEFAULT_TIMEOUT = 10  # seconds
USER_AGENT = f"tidepool/{__version__}"


def build_retry(total: int = 0) -> Retry:
    """Retry strategy for idempotent requests; ``total=0`` disables retrying."""
    return Retry(
        total=total,
        backoff_factor=0.5,  # 0s, 1s, 2s, ...
        status_forcelist=[429, 502, 503, 504],
        allowed_methods=["GET", "HEAD", "OPTIONS"],
        raise_on_status=False,  # let resp.raise_for_status() handle it
    )


#: Default retry strategy: a single attempt per request.
DEFAULT_RETRY = build_retry()


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT
    s.headers["Accept"] = "application/json"

    # Wrap send to inject a default timeout so callers don't need to
    # remember to pass ``timeout=`` every time.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = timeout
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session - import and use directly.
session: requests.Session = create_session()
