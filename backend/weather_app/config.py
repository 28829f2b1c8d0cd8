from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    app_name: str = "Weather Buddy API"
    app_version: str = "1.0.0"
    weatherapi_key: str = ""
    weatherapi_current_url: str = "https://api.weatherapi.com/v1/current.json"
    weatherapi_forecast_url: str = "https://api.weatherapi.com/v1/forecast.json"
    request_timeout_seconds: float = 10.0
    record_rejected_searches: bool = False
    forecast_temperature_unit: str = "Celsius"
    log_level: str = "INFO"


def get_settings() -> Settings:
    api_key_raw = os.getenv("WEATHERAPI_KEY", "").strip()
    current_url_raw = os.getenv("WEATHERAPI_CURRENT_URL", "").strip()
    forecast_url_raw = os.getenv("WEATHERAPI_FORECAST_URL", "").strip()
    timeout_raw = os.getenv("REQUEST_TIMEOUT_SECONDS", "").strip()
    record_rejected_raw = os.getenv("RECORD_REJECTED_SEARCHES", "").strip().lower()
    forecast_unit_raw = os.getenv("FORECAST_TEMPERATURE_UNIT", "").strip().capitalize()
    log_level_raw = os.getenv("LOG_LEVEL", "").strip().upper()

    try:
        request_timeout_seconds = float(timeout_raw) if timeout_raw else 10.0
    except ValueError:
        request_timeout_seconds = 10.0

    if log_level_raw not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        log_level_raw = Settings.log_level

    if forecast_unit_raw not in {"Celsius", "Fahrenheit"}:
        forecast_unit_raw = Settings.forecast_temperature_unit

    return Settings(
        weatherapi_key=api_key_raw,
        weatherapi_current_url=current_url_raw or Settings.weatherapi_current_url,
        weatherapi_forecast_url=forecast_url_raw or Settings.weatherapi_forecast_url,
        request_timeout_seconds=max(1.0, request_timeout_seconds),
        record_rejected_searches=record_rejected_raw in {"1", "true", "yes", "on"},
        forecast_temperature_unit=forecast_unit_raw,
        log_level=log_level_raw,
    )
