"""Common plumbing for source adapters."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import requests
from pydantic import ValidationError

from tidepool.services.http import DEFAULT_TIMEOUT
from tidepool.services.http import session as default_session

logger = logging.getLogger(__name__)

#: Everything an adapter treats as "the upstream failed".
UpstreamError = (
    requests.RequestException,
    ValueError,
    KeyError,
    IndexError,
    TypeError,
    AttributeError,
    ValidationError,
)


class EmptyResponseError(ValueError):
    """Upstream answered 2xx with nothing usable in the body."""


@dataclass(frozen=True)
class SourceConfig:
    """Where an adapter sends requests and how long it waits."""

    base_url: str
    timeout: float = DEFAULT_TIMEOUT

    def url(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"


class SourceAdapter:
    """Base class: holds config and session, performs GETs."""

    #: Human-readable name used in logs and ``source`` fields.
    source_name = "upstream"

    def __init__(
        self,
        config: SourceConfig,
        *,
        session: requests.Session | None = None,
    ) -> None:
        self.config = config
        self.session = session or default_session

    def _get_json(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        *,
        config: SourceConfig | None = None,
    ) -> Any:
        """GET ``path`` and return the decoded body; raises on any failure."""
        config = config or self.config
        resp = self.session.get(config.url(path), params=params or {}, timeout=config.timeout)
        resp.raise_for_status()
        data = resp.json()
        if not data:
            raise EmptyResponseError(f"empty response from {self.source_name} {path}")
        return data

    def _log_failure(self, operation: str, exc: BaseException) -> None:
        logger.warning(
            "%s %s failed, serving fallback: %s", self.source_name, operation, exc
        )


def first(record: dict[str, Any], *keys: str, default: Any = None) -> Any:
    """First non-empty value among ``keys``; ``default`` if none is set."""
    for key in keys:
        value = record.get(key)
        if value not in (None, ""):
            return value
    return default


def as_float(value: Any, ndigits: int | None = None) -> float | None:
    """Coerce an upstream number; ``None`` for absent or non-numeric values."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if number != number:  # NaN
        return None
    return round(number, ndigits) if ndigits is not None else number
