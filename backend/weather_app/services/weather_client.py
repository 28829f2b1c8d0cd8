from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any

import httpx
from pydantic import ValidationError

from weather_app.config import Settings
from weather_app.schemas import TEMPERATURE_FIELDS, TemperatureUnit, UnitPreference, WeatherReading
from weather_app.services.failures import (
    Failure,
    HttpFailure,
    InvalidLocation,
    ParseFailure,
    TransportFailure,
    is_failure,
)


logger = logging.getLogger(__name__)

MAX_FORECAST_HOURS = 24
PARSE_ERRORS = (KeyError, IndexError, TypeError, ValueError, ValidationError)
_WHITESPACE = re.compile(r"\s")


def format_location(location: str) -> str:
    """Provider convention for multi-word place names: whitespace becomes ``_``."""
    return _WHITESPACE.sub("_", location.strip())


@dataclass
class WeatherClient:
    """Blocking WeatherAPI.com client.

    Each operation opens its own connection, performs a single GET and closes
    it again. Provider problems come back as failure values; nothing is retried.
    """

    settings: Settings
    transport: httpx.BaseTransport | None = field(default=None, repr=False)

    def check_location(self, location: str) -> Failure | None:
        response = self._get(url=self.settings.weatherapi_current_url, location=location, params={"days": 1})
        if is_failure(response):
            logger.warning("Location check for %r failed: %s", format_location(location), response.message)
            return response

        payload = _decode_json(response)
        if isinstance(payload, dict) and payload.get("error") is not None:
            failure = _invalid_location(payload["error"])
            logger.warning("Provider rejected location %r: %s", format_location(location), failure.message)
            return failure
        if response.status_code != 200:
            failure = HttpFailure(status=response.status_code)
            logger.warning("Location check for %r failed: %s", format_location(location), failure.message)
            return failure
        if not isinstance(payload, dict):
            failure = payload if is_failure(payload) else ParseFailure(detail="expected a JSON object")
            logger.warning("Location check for %r failed: %s", format_location(location), failure.message)
            return failure
        return None

    def validate_location(self, location: str) -> bool:
        return self.check_location(location) is None

    def fetch_current(self, location: str, units: UnitPreference | None = None) -> WeatherReading | Failure:
        units = units or UnitPreference()
        payload = self._get_json(url=self.settings.weatherapi_current_url, location=location)
        if is_failure(payload):
            _log_fetch_failure("weather", location, payload)
            return payload

        try:
            return _parse_current(payload, units)
        except PARSE_ERRORS as exc:
            failure = ParseFailure(detail=_describe_parse_error(exc))
            _log_fetch_failure("weather", location, failure, exc_info=exc)
            return failure

    def fetch_hourly_forecast_outcome(
        self, location: str, temperature_unit: TemperatureUnit | str | None = None
    ) -> list[WeatherReading] | Failure:
        unit = _resolve_temperature_unit(temperature_unit, self.settings.forecast_temperature_unit)
        payload = self._get_json(url=self.settings.weatherapi_forecast_url, location=location, params={"days": 1})
        if is_failure(payload):
            _log_fetch_failure("forecast", location, payload)
            return payload

        try:
            readings = _parse_hourly_forecast(payload, TEMPERATURE_FIELDS[unit])
        except PARSE_ERRORS as exc:
            failure = ParseFailure(detail=_describe_parse_error(exc))
            _log_fetch_failure("forecast", location, failure, exc_info=exc)
            return failure

        if not readings:
            logger.info("Forecast for %r contained no hourly entries", format_location(location))
        return readings

    def fetch_hourly_forecast(
        self, location: str, temperature_unit: TemperatureUnit | str | None = None
    ) -> list[WeatherReading]:
        outcome = self.fetch_hourly_forecast_outcome(location, temperature_unit=temperature_unit)
        if is_failure(outcome):
            return []
        return outcome

    def _get_json(self, *, url: str, location: str, params: dict[str, Any] | None = None) -> Any:
        response = self._get(url=url, location=location, params=params)
        if is_failure(response):
            return response
        if response.status_code != 200:
            return HttpFailure(status=response.status_code)
        return _decode_json(response)

    def _get(self, *, url: str, location: str, params: dict[str, Any] | None = None) -> httpx.Response | Failure:
        query = {"key": self.settings.weatherapi_key, "q": format_location(location)}
        if params:
            query.update(params)

        try:
            with httpx.Client(timeout=self.settings.request_timeout_seconds, transport=self.transport) as client:
                response = client.get(url, params=query)
        except httpx.RequestError as exc:
            return TransportFailure(detail=str(exc) or exc.__class__.__name__)
        return response


def _decode_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        return ParseFailure(detail=f"invalid JSON body ({exc})")


def _invalid_location(error: Any) -> InvalidLocation:
    if not isinstance(error, dict):
        return InvalidLocation(detail=str(error))
    code = error.get("code")
    return InvalidLocation(
        code=code if isinstance(code, int) else None,
        detail=str(error.get("message") or ""),
    )


def _parse_current(payload: Any, units: UnitPreference) -> WeatherReading:
    current = payload["current"]
    return WeatherReading(
        temperature=current[units.temperature_field_name()],
        humidity=current["humidity"],
        wind_speed=current[units.wind_field_name()],
        icon_ref=current["condition"]["icon"],
    )


def _parse_hourly_forecast(payload: Any, temperature_field: str) -> list[WeatherReading]:
    hours = payload["forecast"]["forecastday"][0]["hour"]
    if not isinstance(hours, list):
        raise TypeError(f"'hour' must be a list, got {type(hours).__name__}")

    readings: list[WeatherReading] = []
    for hour in hours[:MAX_FORECAST_HOURS]:
        condition = hour["condition"]
        readings.append(
            WeatherReading(
                temperature=hour[temperature_field],
                icon_ref=condition["icon"],
                timestamp=hour["time"],
                condition_text=condition["text"],
            )
        )
    return readings


def _describe_parse_error(exc: Exception) -> str:
    if isinstance(exc, KeyError):
        return f"missing field {exc.args[0]!r}"
    if isinstance(exc, ValidationError):
        return f"ill-typed fields ({exc.error_count()} errors)"
    return str(exc) or exc.__class__.__name__


def _log_fetch_failure(what: str, location: str, failure: Failure, exc_info: Exception | None = None) -> None:
    if isinstance(failure, HttpFailure):
        logger.warning("Failed to fetch %s data for %r: response code %s", what, format_location(location), failure.status)
        return
    logger.error("Error fetching %s data for %r: %s", what, format_location(location), failure.message, exc_info=exc_info)


def _resolve_temperature_unit(requested: TemperatureUnit | str | None, default: str) -> TemperatureUnit:
    """Match unit names case-insensitively; unknown names fall back to ``default``."""
    if isinstance(requested, TemperatureUnit):
        return requested
    try:
        return TemperatureUnit((requested or default).strip().capitalize())
    except ValueError:
        logger.warning("Unknown temperature unit %r, using %s", requested, default)
        return TemperatureUnit(default)
