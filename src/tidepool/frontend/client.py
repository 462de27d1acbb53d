"""
Dashboard API client.

``load_dashboard`` is the page's single data call: it fetches
``{api}/dashboard`` with exponential-backoff retries and, if every attempt
fails, substitutes the local demo dataset so the page is never empty.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

import requests

from tidepool.frontend.fallback import local_dashboard_data
from tidepool.services.http import session as default_session

logger = logging.getLogger(__name__)

T = TypeVar("T")

#: Attempts made by ``load_dashboard`` before falling back.
DEFAULT_MAX_ATTEMPTS = 3
#: Delay before the second attempt; doubles after each failure.
DEFAULT_BASE_DELAY = 1.0


class DashboardUnavailable(Exception):
    """The dashboard API could not produce a usable payload."""


@dataclass
class DashboardLoad:
    """Result of loading the dashboard: the data to render and any error."""

    data: dict[str, Any]
    error: str | None = None

    @property
    def is_fallback(self) -> bool:
        return self.error is not None


def fetch_dashboard(
    api_base_url: str,
    *,
    session: requests.Session | None = None,
    timeout: float | None = None,
) -> dict[str, Any]:
    """
    GET ``{api_base_url}/dashboard`` and unwrap the envelope.

    Raises:
        DashboardUnavailable: on network errors, non-2xx responses, bodies
            that are not JSON, or an envelope with ``success: false``.
    """
    session = session or default_session
    url = f"{api_base_url.rstrip('/')}/dashboard"
    try:
        resp = session.get(url, timeout=timeout)
    except requests.RequestException as exc:
        raise DashboardUnavailable(str(exc)) from exc
    if not resp.ok:
        raise DashboardUnavailable(f"API error: {resp.status_code}")
    try:
        result = resp.json()
    except ValueError as exc:
        raise DashboardUnavailable("API returned invalid JSON") from exc
    if not isinstance(result, dict) or not result.get("success"):
        error = result.get("error") if isinstance(result, dict) else None
        raise DashboardUnavailable(error or "Failed to fetch data")
    data: dict[str, Any] = result.get("data") or {}
    return data


def retry_with_backoff(
    fn: Callable[[], T],
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    base_delay: float = DEFAULT_BASE_DELAY,
    *,
    retry_on: tuple[type[BaseException], ...] = (Exception,),
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """
    Call ``fn`` until it succeeds, doubling the wait after each failure.

    Waits ``base_delay``, ``2 * base_delay``, ... between attempts. The error
    from the last attempt is re-raised.
    """
    delay = base_delay
    for attempt in range(1, max_attempts + 1):
        try:
            return fn()
        except retry_on as exc:
            if attempt >= max_attempts:
                raise
            logger.info("Attempt %d failed (%s), retrying in %.1fs", attempt, exc, delay)
            sleep(delay)
            delay *= 2
    raise ValueError("max_attempts must be at least 1")


def load_dashboard(
    api_base_url: str,
    *,
    session: requests.Session | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    base_delay: float = DEFAULT_BASE_DELAY,
    sleep: Callable[[float], None] = time.sleep,
) -> DashboardLoad:
    """Fetch the dashboard with retries; use local demo data if all attempts fail."""
    try:
        data = retry_with_backoff(
            lambda: fetch_dashboard(api_base_url, session=session),
            max_attempts=max_attempts,
            base_delay=base_delay,
            retry_on=(DashboardUnavailable,),
            sleep=sleep,
        )
    except DashboardUnavailable as exc:
        logger.error("Dashboard unavailable, showing demo data: %s", exc)
        return DashboardLoad(data=local_dashboard_data(), error=str(exc))
    return DashboardLoad(data=data)
