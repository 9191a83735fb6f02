from typing import Optional

from weatherdash.models.weather import AlertDTO, CurrentWeatherDTO, DailyForecastDTO, HourlyForecastDTO
from weatherdash.stores.base import Store


class WeatherStore(Store):
    """Latest weather for the selected city. Every setter replaces its slot wholesale."""

    name = "weather"

    def _initial_state(self) -> dict:
        return {
            "current_weather": None,
            "hourly_forecast": [],
            "daily_forecast": [],
            "alerts": [],
            "loading": False,
            "error": None,
        }

    @property
    def current_weather(self) -> Optional[CurrentWeatherDTO]:
        return self._get("current_weather")

    @property
    def hourly_forecast(self) -> list[HourlyForecastDTO]:
        return self._get("hourly_forecast")

    @property
    def daily_forecast(self) -> list[DailyForecastDTO]:
        return self._get("daily_forecast")

    @property
    def alerts(self) -> list[AlertDTO]:
        return self._get("alerts")

    @property
    def loading(self) -> bool:
        return self._get("loading")

    @property
    def error(self) -> Optional[str]:
        return self._get("error")

    def set_current_weather(self, data: CurrentWeatherDTO) -> None:
        self._set("current_weather", data)

    def set_hourly_forecast(self, data: list[HourlyForecastDTO]) -> None:
        self._set("hourly_forecast", list(data))

    def set_daily_forecast(self, data: list[DailyForecastDTO]) -> None:
        self._set("daily_forecast", list(data))

    def set_alerts(self, data: list[AlertDTO]) -> None:
        self._set("alerts", list(data))

    def set_loading(self, value: bool) -> None:
        self._set("loading", value)

    def set_error(self, value: Optional[str]) -> None:
        self._set("error", value)

    def clear_error(self) -> None:
        self._set("error", None)
