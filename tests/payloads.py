"""Canned backend payloads and a notifier that records what it was told."""

from typing import Any, Optional

from weatherdash.errors import WeatherDashError

BASE_URL = "http://weather.test"


def envelope(data: Any = None, code: int = 0, message: Optional[str] = "ok", timestamp: int = 1700000000000) -> dict:
    body: dict[str, Any] = {"code": code, "timestamp": timestamp}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return body


def current_weather_payload(**overrides: Any) -> dict:
    payload = {
        "city": "Beijing",
        "lat": 39.9042,
        "lon": 116.4074,
        "temp": 20.5,
        "feelsLike": 19.8,
        "description": "Sunny",
        "icon": "01d",
        "windSpeed": 3.2,
        "windDeg": 180,
        "humidity": 45,
        "pressure": 1013.0,
        "visibility": 10.0,
        "timestamp": 1700000000,
    }
    payload.update(overrides)
    return payload


def hourly_payload(**overrides: Any) -> dict:
    payload = {
        "city": "Beijing",
        "lat": 39.9042,
        "lon": 116.4074,
        "time": "2024-05-01T10:00:00",
        "temp": 18.0,
        "feelsLike": 17.5,
        "description": "Cloudy",
        "icon": "03d",
        "windSpeed": 2.5,
        "humidity": 50,
        "pop": 10.0,
    }
    payload.update(overrides)
    return payload


def daily_payload(**overrides: Any) -> dict:
    payload = {
        "city": "Beijing",
        "lat": 39.9042,
        "lon": 116.4074,
        "date": "2024-05-01",
        "tempMin": 12.0,
        "tempMax": 24.0,
        "description": "Sunny",
        "icon": "01d",
        "windSpeed": 3.0,
        "humidity": 40,
        "pop": 0.0,
    }
    payload.update(overrides)
    return payload


def alert_payload(**overrides: Any) -> dict:
    payload = {
        "city": "Beijing",
        "lat": 39.9042,
        "lon": 116.4074,
        "event": "High Temperature",
        "description": "Temperatures above 35C expected",
        "start": "2024-05-01T08:00:00",
        "end": "2024-05-01T20:00:00",
        "level": "Yellow",
        "tags": "heat",
    }
    payload.update(overrides)
    return payload


def preference_payload(**overrides: Any) -> dict:
    payload = {
        "id": 1,
        "defaultCity": "Beijing",
        "temperatureUnit": "C",
        "windSpeedUnit": "m/s",
        "showCurrentCard": True,
        "showLineChart": True,
        "showBarChart": True,
        "showGaugeCard": True,
        "showAlertsCard": True,
        "showAiAssistant": True,
    }
    payload.update(overrides)
    return payload


class RecordingNotifier:
    def __init__(self) -> None:
        self.errors: list[WeatherDashError] = []

    def notify(self, error: WeatherDashError) -> None:
        self.errors.append(error)

    @property
    def messages(self) -> list[str]:
        return [e.message for e in self.errors]
