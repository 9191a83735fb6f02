"""
Weather REST API — current conditions, forecasts and alerts for a coordinate.

No caching and no de-duplication: two calls for the same place both hit the backend.
"""

from weatherdash.models.weather import AlertDTO, CurrentWeatherDTO, DailyForecastDTO, HourlyForecastDTO
from weatherdash.transport.http import HttpClient


class WeatherAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    @staticmethod
    def _params(lat: float, lon: float, city: str) -> dict[str, object]:
        return {"lat": lat, "lon": lon, "city": city}

    async def current(self, lat: float, lon: float, city: str) -> CurrentWeatherDTO:
        return await self._http.get(
            "/api/weather/current", self._params(lat, lon, city), response_model=CurrentWeatherDTO,
        )

    async def hourly(self, lat: float, lon: float, city: str) -> list[HourlyForecastDTO]:
        return await self._http.get(
            "/api/weather/forecast/hourly", self._params(lat, lon, city), response_model=list[HourlyForecastDTO],
        )

    async def daily(self, lat: float, lon: float, city: str) -> list[DailyForecastDTO]:
        return await self._http.get(
            "/api/weather/forecast/daily", self._params(lat, lon, city), response_model=list[DailyForecastDTO],
        )

    async def alerts(self, lat: float, lon: float, city: str) -> list[AlertDTO]:
        return await self._http.get(
            "/api/weather/alerts", self._params(lat, lon, city), response_model=list[AlertDTO],
        )
