from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


class TemperatureUnit(str, Enum):
    CELSIUS = "Celsius"
    FAHRENHEIT = "Fahrenheit"


class WindSpeedUnit(str, Enum):
    KPH = "Kph"
    MPH = "Mph"


TEMPERATURE_FIELDS = {TemperatureUnit.CELSIUS: "temp_c", TemperatureUnit.FAHRENHEIT: "temp_f"}
TEMPERATURE_SYMBOLS = {TemperatureUnit.CELSIUS: "°C", TemperatureUnit.FAHRENHEIT: "°F"}
WIND_FIELDS = {WindSpeedUnit.KPH: "wind_kph", WindSpeedUnit.MPH: "wind_mph"}


class UnitPreference(BaseModel):
    """Units the caller wants readings in. Read per request, never mutated by the client."""

    model_config = ConfigDict(frozen=True)

    temperature_unit: TemperatureUnit = TemperatureUnit.CELSIUS
    wind_speed_unit: WindSpeedUnit = WindSpeedUnit.KPH

    def temperature_field_name(self) -> str:
        return TEMPERATURE_FIELDS[self.temperature_unit]

    def wind_field_name(self) -> str:
        return WIND_FIELDS[self.wind_speed_unit]

    def temperature_symbol(self) -> str:
        return TEMPERATURE_SYMBOLS[self.temperature_unit]

    def wind_speed_label(self) -> str:
        return self.wind_speed_unit.value


class WeatherReading(BaseModel):
    """One observation: current conditions or a single forecast hour."""

    model_config = ConfigDict(frozen=True)

    temperature: float = Field(strict=True)
    humidity: float = Field(default=0.0, ge=0, le=100, strict=True)
    wind_speed: float = Field(default=0.0, strict=True)
    icon_ref: str = Field(description="Scheme-relative icon path as returned by the provider.")
    timestamp: str | None = None
    condition_text: str | None = None

    @computed_field
    @property
    def icon_url(self) -> str:
        return f"https:{self.icon_ref}"

    def describe_current(self, units: UnitPreference) -> list[str]:
        return [
            f"Temperature: {self.temperature}{units.temperature_symbol()}",
            f"Humidity: {self.humidity}%",
            f"Wind Speed: {self.wind_speed} {units.wind_speed_label()}",
        ]

    def describe_forecast(self, symbol: str) -> str:
        return f"Date: {self.timestamp} - Temperature: {self.temperature}{symbol} - Condition: {self.condition_text}"


class SearchHistoryEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    location: str
    timestamp: str
    reading: WeatherReading | None = None
    units: UnitPreference = Field(default_factory=UnitPreference, description="Units the reading was fetched in.")

    def describe(self) -> str:
        if self.reading is None:
            return f"{self.timestamp}: {self.location} - no data"
        return f"{self.timestamp}: {self.location} - {self.reading.temperature}{self.units.temperature_symbol()}"


class SearchRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    location: str = Field(max_length=120, description="Free-text place name.")
    units: UnitPreference = Field(default_factory=UnitPreference)

    @model_validator(mode="after")
    def validate_location_input(self) -> "SearchRequest":
        if not self.location.strip():
            raise ValueError("Provide a location to search for.")
        return self
