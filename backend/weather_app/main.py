from __future__ import annotations

import asyncio
import logging
from datetime import datetime, time, timezone

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from weather_app.config import get_settings
from weather_app.schemas import SearchRequest, TEMPERATURE_SYMBOLS, TemperatureUnit, UnitPreference
from weather_app.services.daypart import DAYPART_BACKGROUNDS, classify
from weather_app.services.failures import Failure, is_failure
from weather_app.services.history import SearchHistory
from weather_app.services.weather_client import WeatherClient


settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
# httpx logs full request URLs, which carry the API key.
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)

weather_client = WeatherClient(settings=settings)
search_history = SearchHistory()

app = FastAPI(title=settings.app_name, version=settings.app_version)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

INVALID_LOCATION_MESSAGE = "Invalid location. Please enter a valid location name."
CURRENT_FAILURE_MESSAGE = "Could not fetch weather data."
FORECAST_FAILURE_MESSAGE = "Could not fetch forecast data."


@app.get("/api/health")
async def health() -> dict:
    return {
        "status": "ok",
        "service": settings.app_name,
        "timestamp_utc": datetime.now(tz=timezone.utc).isoformat(),
    }


@app.post("/api/search")
async def search(payload: SearchRequest) -> dict:
    location = payload.location.strip()
    units = payload.units

    rejection = await asyncio.to_thread(weather_client.check_location, location)
    if rejection is not None:
        if settings.record_rejected_searches:
            search_history.append(location, None, units)
        raise HTTPException(status_code=404, detail=INVALID_LOCATION_MESSAGE)

    current, forecast = await asyncio.gather(
        asyncio.to_thread(weather_client.fetch_current, location, units),
        asyncio.to_thread(weather_client.fetch_hourly_forecast_outcome, location),
    )

    errors: dict[str, dict] = {}
    if is_failure(current):
        errors["current"] = _serialize_failure(current, CURRENT_FAILURE_MESSAGE)
        current = None
    if is_failure(forecast):
        errors["forecast"] = _serialize_failure(forecast, FORECAST_FAILURE_MESSAGE)
        forecast = []
    elif not forecast:
        errors["forecast"] = {"kind": "empty", "message": FORECAST_FAILURE_MESSAGE, "reason": "No hourly entries."}

    search_history.append(location, current, units)

    forecast_symbol = TEMPERATURE_SYMBOLS[TemperatureUnit(settings.forecast_temperature_unit)]
    daypart = classify(datetime.now())
    return {
        "location": location,
        "units": _serialize_units(units),
        "current": current.model_dump() if current is not None else None,
        "current_display": current.describe_current(units) if current is not None else [CURRENT_FAILURE_MESSAGE],
        "forecast": [reading.model_dump() for reading in forecast],
        "forecast_display": [reading.describe_forecast(forecast_symbol) for reading in forecast]
        or [FORECAST_FAILURE_MESSAGE],
        "forecast_temperature_symbol": forecast_symbol,
        "errors": errors,
        "daypart": daypart.value,
        "background": DAYPART_BACKGROUNDS[daypart],
    }


@app.get("/api/history")
async def history() -> dict:
    entries = search_history.entries()
    return {
        "count": len(entries),
        "entries": [
            {**entry.model_dump(), "display": entry.describe()}
            for entry in entries
        ],
    }


@app.get("/api/daypart")
async def daypart(at: time | None = Query(default=None)) -> dict:
    moment = at or datetime.now().time()
    resolved = classify(moment)
    return {
        "time": moment.isoformat(),
        "daypart": resolved.value,
        "background": DAYPART_BACKGROUNDS[resolved],
    }


def _serialize_failure(failure: Failure, message: str) -> dict:
    return {"kind": failure.kind, "message": message, "reason": failure.message}


def _serialize_units(units: UnitPreference) -> dict:
    return {
        "temperature_unit": units.temperature_unit.value,
        "wind_speed_unit": units.wind_speed_unit.value,
        "temperature_symbol": units.temperature_symbol(),
        "wind_speed_label": units.wind_speed_label(),
    }
