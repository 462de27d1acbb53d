"""
Site build: render the dashboard page into the site directory.

Run locally:
    tidepool build            # once
    tidepool build --watch    # rebuild every refresh interval
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import requests

from tidepool.config import Settings, get_settings
from tidepool.frontend.client import load_dashboard
from tidepool.renderers.page import build_dashboard_page

logger = logging.getLogger(__name__)

INDEX_FILE = "index.html"


def build_site(
    settings: Settings | None = None,
    *,
    api_base_url: str | None = None,
    output_dir: Path | None = None,
    session: requests.Session | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> Path:
    """Load the dashboard and write ``index.html``; returns the written path."""
    settings = settings or get_settings()
    output_dir = output_dir or settings.site_dir
    loaded = load_dashboard(
        api_base_url or settings.api_base_url,
        session=session,
        max_attempts=settings.retry_attempts,
        base_delay=settings.retry_base_delay,
        sleep=sleep,
    )
    html = build_dashboard_page(
        loaded.data,
        title=settings.app_name,
        error=loaded.error,
        updated_at=datetime.now(),
    )
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / INDEX_FILE
    path.write_text(html, encoding="utf-8")
    logger.info("Wrote %s%s", path, " (demo data)" if loaded.is_fallback else "")
    return path


def watch(
    settings: Settings | None = None,
    *,
    interval: float | None = None,
    max_builds: int | None = None,
    sleep: Callable[[float], None] = time.sleep,
    **build_kwargs: object,
) -> int:
    """
    Rebuild the site after a short start-up delay, then every ``interval`` seconds.

    Runs until interrupted, or until ``max_builds`` refreshes have run. A
    failed build is logged and retried on the next interval. Returns the
    number of refreshes attempted.
    """
    settings = settings or get_settings()
    interval = interval if interval is not None else settings.refresh_interval
    sleep(settings.startup_delay)

    builds = 0
    while max_builds is None or builds < max_builds:
        if builds:
            logger.info("Refreshing dashboard data...")
        try:
            build_site(settings, sleep=sleep, **build_kwargs)  # type: ignore[arg-type]
        except Exception:
            logger.exception("Site build failed; retrying in %.0fs", interval)
        builds += 1
        if max_builds is None or builds < max_builds:
            sleep(interval)
    return builds
