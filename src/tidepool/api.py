"""
HTTP API.

One route per adapter operation plus the combined dashboard route. Every
response uses the same JSON envelope::

    {"success": true, ...fields, "timestamp": "2024-02-01T12:00:00.000Z"}
    {"success": false, "error": "...", "timestamp": "..."}

Query parameters are parsed leniently: a missing or non-numeric value falls
back to the route's default instead of producing a validation error.

Run locally:
    tidepool serve
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from tidepool import __version__
from tidepool.config import Settings, get_settings
from tidepool.dashboard import DASHBOARD_SOURCES, Sources, build_dashboard

logger = logging.getLogger(__name__)

DEFAULT_FISH_LIMIT = 10
DEFAULT_OBSERVATION_LIMIT = 20

# California coast, used when an area query omits its bounds
DEFAULT_AREA = {"min_lat": 32.0, "max_lat": 46.0, "min_lon": -126.0, "max_lon": -117.0}

router = APIRouter(prefix="/api")


# =============================================================================
# Helpers
# =============================================================================


def timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_int(value: str | None, default: int) -> int:
    """Positive integer from a query string, or ``default``."""
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def parse_float(value: str | None, default: float) -> float:
    """Finite float from a query string, or ``default``."""
    try:
        number = float(str(value).strip())
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


def to_json(value: Any) -> Any:
    """Serialize models (or lists of them) with wire field names."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, list):
        return [to_json(item) for item in value]
    return value


def error_body(error: str, **extra: Any) -> dict[str, Any]:
    return {"success": False, "error": error, **extra, "timestamp": timestamp()}


def respond(operation: str, produce: Callable[[], dict[str, Any]]) -> Any:
    """Run a route body and wrap its fields in the success or error envelope."""
    try:
        fields = produce()
    except Exception as exc:  # noqa: BLE001
        logger.exception("%s failed", operation)
        return JSONResponse(status_code=500, content=error_body(str(exc)))
    return {"success": True, **fields, "timestamp": timestamp()}


def get_sources(request: Request) -> Sources:
    sources: Sources = request.app.state.sources
    return sources


def get_app_settings(request: Request) -> Settings:
    settings: Settings = request.app.state.settings
    return settings


# =============================================================================
# Routes
# =============================================================================


@router.get("/health")
def health(settings: Settings = Depends(get_app_settings)) -> dict[str, Any]:
    return {
        "status": "ok",
        "message": f"{settings.app_name} is running",
        "timestamp": timestamp(),
    }


@router.get("/fish-species")
def fish_species(limit: str | None = None, sources: Sources = Depends(get_sources)) -> Any:
    return respond(
        "fish-species",
        lambda: {
            "data": to_json(
                sources.fishbase.get_fish_species(parse_int(limit, DEFAULT_FISH_LIMIT))
            ),
            "source": sources.fishbase.source_name,
        },
    )


@router.get("/fish-species/{family}")
def fish_by_family(family: str, sources: Sources = Depends(get_sources)) -> Any:
    return respond(
        "fish-species/family",
        lambda: {
            "family": family,
            "data": to_json(sources.fishbase.get_fish_by_family(family)),
            "source": sources.fishbase.source_name,
        },
    )


@router.get("/biodiversity")
def biodiversity(limit: str | None = None, sources: Sources = Depends(get_sources)) -> Any:
    return respond(
        "biodiversity",
        lambda: to_json(
            sources.obis.get_biodiversity_observations(
                limit=parse_int(limit, DEFAULT_OBSERVATION_LIMIT)
            )
        ),
    )


@router.get("/biodiversity/area")
def biodiversity_area(
    min_lat: str | None = None,
    max_lat: str | None = None,
    min_lon: str | None = None,
    max_lon: str | None = None,
    sources: Sources = Depends(get_sources),
) -> Any:
    def produce() -> dict[str, Any]:
        bounds = {
            "min_lat": parse_float(min_lat, DEFAULT_AREA["min_lat"]),
            "max_lat": parse_float(max_lat, DEFAULT_AREA["max_lat"]),
            "min_lon": parse_float(min_lon, DEFAULT_AREA["min_lon"]),
            "max_lon": parse_float(max_lon, DEFAULT_AREA["max_lon"]),
        }
        return {
            "bounds": bounds,
            "data": to_json(sources.obis.get_observations_by_area(**bounds)),
            "source": sources.obis.source_name,
        }

    return respond("biodiversity/area", produce)


@router.get("/species-stats")
def species_stats(sources: Sources = Depends(get_sources)) -> Any:
    return respond(
        "species-stats",
        lambda: {
            "data": to_json(sources.obis.get_species_stats()),
            "source": sources.obis.source_name,
        },
    )


@router.get("/ocean-weather")
def ocean_weather(
    lat: str | None = None,
    lon: str | None = None,
    sources: Sources = Depends(get_sources),
    settings: Settings = Depends(get_app_settings),
) -> Any:
    return respond(
        "ocean-weather",
        lambda: {
            "data": to_json(
                sources.openmeteo.get_ocean_weather(
                    parse_float(lat, settings.default_lat),
                    parse_float(lon, settings.default_lon),
                )
            )
        },
    )


@router.get("/water-temperature")
def water_temperature(
    lat: str | None = None,
    lon: str | None = None,
    sources: Sources = Depends(get_sources),
    settings: Settings = Depends(get_app_settings),
) -> Any:
    return respond(
        "water-temperature",
        lambda: {
            "data": to_json(
                sources.openmeteo.get_water_temperature(
                    parse_float(lat, settings.default_lat),
                    parse_float(lon, settings.default_lon),
                )
            )
        },
    )


@router.get("/ocean-data-locations")
def ocean_data_locations(sources: Sources = Depends(get_sources)) -> Any:
    return respond(
        "ocean-data-locations",
        lambda: {
            "data": to_json(sources.openmeteo.get_ocean_data_multiple_locations()),
            "source": sources.openmeteo.source_name,
        },
    )


@router.get("/dashboard")
def dashboard(
    sources: Sources = Depends(get_sources),
    settings: Settings = Depends(get_app_settings),
) -> Any:
    return respond(
        "dashboard",
        lambda: {
            "data": to_json(
                build_dashboard(
                    sources,
                    fish_count=settings.dashboard_fish_count,
                    observation_count=settings.dashboard_observation_count,
                )
            ),
            "sources": DASHBOARD_SOURCES,
        },
    )


# =============================================================================
# Application Factory
# =============================================================================


async def not_found_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        return JSONResponse(
            status_code=404,
            content={"success": False, "error": "Not found", "path": request.url.path},
        )
    return JSONResponse(status_code=exc.status_code, content=error_body(str(exc.detail)))


async def server_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Server error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=error_body("Internal server error", message=str(exc)),
    )


def create_app(
    settings: Settings | None = None,
    sources: Sources | None = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Runtime settings (defaults to :func:`get_settings`).
        sources: Adapters to serve from; built from ``settings`` when omitted.
    """
    settings = settings or get_settings()
    application = FastAPI(title=settings.app_name, version=__version__, debug=settings.debug)
    application.state.settings = settings
    application.state.sources = sources or Sources.from_settings(settings)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )
    application.add_exception_handler(StarletteHTTPException, not_found_handler)
    application.add_exception_handler(Exception, server_error_handler)
    application.include_router(router)

    # Built front end, served last so /api routes take precedence
    if settings.site_dir.is_dir():
        application.mount("/", StaticFiles(directory=settings.site_dir, html=True), name="site")

    return application
