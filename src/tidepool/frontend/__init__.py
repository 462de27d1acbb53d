"""Dashboard front end.

Fetches the combined ``/api/dashboard`` payload, falls back to a local demo
dataset when the API is unusable, and writes the rendered page to the site
directory.

Public API:
  - client: fetch_dashboard, load_dashboard, retry_with_backoff, DashboardUnavailable
  - fallback: local_dashboard_data
  - build: build_site, watch
"""

from tidepool.frontend.build import build_site, watch
from tidepool.frontend.client import (
    DashboardLoad,
    DashboardUnavailable,
    fetch_dashboard,
    load_dashboard,
    retry_with_backoff,
)
from tidepool.frontend.fallback import local_dashboard_data

__all__ = [
    "DashboardLoad",
    "DashboardUnavailable",
    "build_site",
    "fetch_dashboard",
    "load_dashboard",
    "local_dashboard_data",
    "retry_with_backoff",
    "watch",
]
