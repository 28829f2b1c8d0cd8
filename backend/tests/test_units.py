import pytest
from pydantic import ValidationError

from weather_app.schemas import TemperatureUnit, UnitPreference, WeatherReading, WindSpeedUnit


def test_unit_preference_defaults_to_celsius_and_kph() -> None:
    units = UnitPreference()

    assert units.temperature_unit is TemperatureUnit.CELSIUS
    assert units.wind_speed_unit is WindSpeedUnit.KPH
    assert units.temperature_field_name() == "temp_c"
    assert units.wind_field_name() == "wind_kph"
    assert units.temperature_symbol() == "°C"


@pytest.mark.parametrize("wind_unit", list(WindSpeedUnit))
def test_temperature_field_depends_only_on_temperature_unit(wind_unit: WindSpeedUnit) -> None:
    celsius = UnitPreference(temperature_unit=TemperatureUnit.CELSIUS, wind_speed_unit=wind_unit)
    fahrenheit = UnitPreference(temperature_unit=TemperatureUnit.FAHRENHEIT, wind_speed_unit=wind_unit)

    assert celsius.temperature_field_name() == "temp_c"
    assert fahrenheit.temperature_field_name() == "temp_f"
    assert fahrenheit.temperature_symbol() == "°F"


@pytest.mark.parametrize("temperature_unit", list(TemperatureUnit))
def test_wind_field_depends_only_on_wind_unit(temperature_unit: TemperatureUnit) -> None:
    kph = UnitPreference(temperature_unit=temperature_unit, wind_speed_unit=WindSpeedUnit.KPH)
    mph = UnitPreference(temperature_unit=temperature_unit, wind_speed_unit=WindSpeedUnit.MPH)

    assert kph.wind_field_name() == "wind_kph"
    assert mph.wind_field_name() == "wind_mph"
    assert mph.wind_speed_label() == "Mph"


def test_unit_preference_accepts_display_names_and_rejects_unknown_units() -> None:
    units = UnitPreference.model_validate({"temperature_unit": "Fahrenheit", "wind_speed_unit": "Mph"})
    assert units.temperature_field_name() == "temp_f"

    with pytest.raises(ValidationError):
        UnitPreference.model_validate({"temperature_unit": "Kelvin"})


def test_weather_reading_builds_https_icon_url_and_is_frozen() -> None:
    reading = WeatherReading(temperature=15.0, humidity=70, wind_speed=10.0, icon_ref="//x/icon.png")

    assert reading.icon_url == "https://x/icon.png"
    assert reading.model_dump()["icon_url"] == "https://x/icon.png"
    with pytest.raises(ValidationError):
        reading.temperature = 20.0  # type: ignore[misc]


def test_weather_reading_rejects_humidity_outside_percentage_range() -> None:
    with pytest.raises(ValidationError):
        WeatherReading(temperature=15.0, humidity=120, icon_ref="//x/icon.png")


def test_weather_reading_display_lines() -> None:
    reading = WeatherReading(temperature=59.0, humidity=70, wind_speed=6.2, icon_ref="//x/icon.png")
    units = UnitPreference(temperature_unit=TemperatureUnit.FAHRENHEIT, wind_speed_unit=WindSpeedUnit.MPH)

    assert reading.describe_current(units) == [
        "Temperature: 59.0°F",
        "Humidity: 70.0%",
        "Wind Speed: 6.2 Mph",
    ]

    hour = WeatherReading(temperature=11.5, icon_ref="//x/rain.png", timestamp="2026-10-19 13:00", condition_text="Light rain")
    assert hour.describe_forecast("°C") == "Date: 2026-10-19 13:00 - Temperature: 11.5°C - Condition: Light rain"
