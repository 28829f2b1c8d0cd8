from weather_app.config import Settings, get_settings


def test_get_settings_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("WEATHERAPI_KEY", " secret ")
    monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "4.5")
    monkeypatch.setenv("RECORD_REJECTED_SEARCHES", "true")
    monkeypatch.setenv("FORECAST_TEMPERATURE_UNIT", "fahrenheit")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.weatherapi_key == "secret"
    assert settings.request_timeout_seconds == 4.5
    assert settings.record_rejected_searches is True
    assert settings.forecast_temperature_unit == "Fahrenheit"
    assert settings.log_level == "DEBUG"
    assert settings.weatherapi_current_url == Settings.weatherapi_current_url


def test_get_settings_falls_back_on_invalid_values(monkeypatch) -> None:
    for name in ("WEATHERAPI_KEY", "RECORD_REJECTED_SEARCHES"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "soon")
    monkeypatch.setenv("FORECAST_TEMPERATURE_UNIT", "Kelvin")
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    settings = get_settings()

    assert settings.weatherapi_key == ""
    assert settings.request_timeout_seconds == 10.0
    assert settings.record_rejected_searches is False
    assert settings.forecast_temperature_unit == "Celsius"
    assert settings.log_level == "INFO"
