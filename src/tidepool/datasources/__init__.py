"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, default config, the adapter class
    └── fallback.py       # Static payloads returned when the source fails

Every adapter derives from :class:`~tidepool.datasources.base.SourceAdapter`
and follows the same contract: one GET per logical fetch, a bounded timeout,
upstream fields mapped to :mod:`tidepool.schemas` models, and on *any*
failure the fallback payload of the same shape. Adapter methods never raise.

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with the files above.
   See ``fishbase/`` for a minimal example, ``openmeteo/`` for a richer one.

2. Subclass ``SourceAdapter`` and write one method per operation::

       def get_something(self, lat: float) -> Something:
           try:
               data = self._get_json("something", {"lat": lat})
               return _parse(data)
           except UpstreamError as exc:
               self._log_failure("something", exc)
               return self.fallback.something(lat)

3. Re-export public API in ``__init__.py`` with ``__all__``.

4. Wire into :class:`tidepool.dashboard.Sources` and add a route in
   :mod:`tidepool.api`.

5. Add tests in ``tests/test_{name}.py``.
"""

from tidepool.datasources.base import SourceAdapter, SourceConfig, UpstreamError

__all__ = ["SourceAdapter", "SourceConfig", "UpstreamError"]
