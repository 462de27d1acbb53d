"""Tidepool - marine data dashboard.

Architecture::

    datasources/   External APIs (FishBase, OBIS, Open-Meteo) with fallbacks
    reference/     Static reference data (dashboard locations, ocean regions)
    dashboard.py   Aggregator joining every source into one payload
    api.py         FastAPI router wrapping each operation in a JSON envelope
    renderers/     Pure data -> HTML (species, stats, observations, weather)
    frontend/      Dashboard client, local fallback dataset, site build
    services/      Shared utilities (HTTP session with timeout)

Data flow: datasources -> dashboard -> api -> frontend -> renderers -> site/

Extension points - see each package's docstring for step-by-step guides:
  - New data source:   datasources/__init__.py
  - New UI module:     renderers/__init__.py
"""

__version__ = "0.1.0"

from tidepool.config import Settings
from tidepool.schemas import DashboardPayload

__all__ = ["DashboardPayload", "Settings", "__version__"]
