"""
AsyncWeatherDash / WeatherDash — API clients wired to the application state.

The flows here are the callers the stores expect: they resolve data through an
API client and then apply it with a store setter. Nothing cancels an in-flight
request, so when two refreshes overlap the one that resolves last wins, even if
it was issued first.
"""

import asyncio
import logging
from typing import Any, Optional

from weatherdash.assistant import AssistantAPI
from weatherdash.cities import CitiesAPI
from weatherdash.config import Settings, load_settings
from weatherdash.errors import WeatherDashError
from weatherdash.favorites import FavoritesAPI
from weatherdash.health import HealthAPI
from weatherdash.models.chat import ChatMessage, Role
from weatherdash.models.city import CityDTO, FavoriteCreateDTO
from weatherdash.models.health import HealthStatus
from weatherdash.models.preference import PreferenceDTO
from weatherdash.notify import Notifier
from weatherdash.preferences import PreferencesAPI
from weatherdash.stores.state import AppState
from weatherdash.transport.http import HttpClient
from weatherdash.weather import WeatherAPI

logger = logging.getLogger(__name__)


class AsyncWeatherDash:
    """Async client (primary)."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout_ms: Optional[int] = None,
        notifier: Optional[Notifier] = None,
        state: Optional[AppState] = None,
        settings: Optional[Settings] = None,
        http: Optional[HttpClient] = None,
    ):
        self.settings = settings or load_settings(base_url=base_url, timeout_ms=timeout_ms)
        self.http = http or HttpClient(
            base_url=self.settings.base_url,
            timeout_ms=self.settings.timeout_ms,
            notifier=notifier,
        )
        self.state = state or AppState()

        self.weather = WeatherAPI(self.http)
        self.cities = CitiesAPI(self.http)
        self.preferences = PreferencesAPI(self.http)
        self.favorites = FavoritesAPI(self.http)
        self.assistant = AssistantAPI(self.http)
        self.health_api = HealthAPI(self.http)

        self.favorite_list: list[CityDTO] = []

    # -- weather --------------------------------------------------------------

    async def refresh_weather(self, city: Optional[CityDTO] = None) -> None:
        """Fetch current, hourly, daily and alerts concurrently; each result lands in its slot as it resolves."""
        store = self.state.weather
        city = city or self.state.city.current_city
        store.set_loading(True)
        store.clear_error()

        async def _apply(coro: Any, setter: Any) -> None:
            setter(await coro)

        results = await asyncio.gather(
            _apply(self.weather.current(city.lat, city.lon, city.name), store.set_current_weather),
            _apply(self.weather.hourly(city.lat, city.lon, city.name), store.set_hourly_forecast),
            _apply(self.weather.daily(city.lat, city.lon, city.name), store.set_daily_forecast),
            _apply(self.weather.alerts(city.lat, city.lon, city.name), store.set_alerts),
            return_exceptions=True,
        )
        failures = [r for r in results if isinstance(r, BaseException)]
        for failure in failures:
            if not isinstance(failure, WeatherDashError):
                store.set_loading(False)
                raise failure
        if failures:
            store.set_error(failures[0].message)  # type: ignore[union-attr]
        store.set_loading(False)

    # -- cities ---------------------------------------------------------------

    async def search_cities(self, keyword: str) -> list[CityDTO]:
        return await self.cities.search(keyword)

    async def select_city(self, city: CityDTO, refresh: bool = True) -> None:
        self.state.city.set_current_city(city)
        if refresh:
            await self.refresh_weather(city)

    # -- preferences ----------------------------------------------------------

    async def load_preferences(self) -> PreferenceDTO:
        prefs = await self.preferences.get()
        self.state.preference.set_preferences(prefs)
        return prefs

    async def save_preferences(self, prefs: PreferenceDTO) -> PreferenceDTO:
        saved = await self.preferences.update(prefs)
        self.state.preference.set_preferences(saved)
        return saved

    # -- favorites ------------------------------------------------------------

    async def load_favorites(self) -> list[CityDTO]:
        self.favorite_list = await self.favorites.list()
        return self.favorite_list

    async def add_favorite(self, city: CityDTO) -> CityDTO:
        created = await self.favorites.add(FavoriteCreateDTO.from_city(city))
        self.favorite_list = self.favorite_list + [created]
        return created

    async def remove_favorite(self, city: CityDTO) -> None:
        await self.favorites.remove(city.name, city.country, city.lat, city.lon)
        self.favorite_list = [f for f in self.favorite_list if f.key != city.key]

    def is_favorite(self, city: CityDTO) -> bool:
        return any(f.key == city.key for f in self.favorite_list)

    # -- assistant ------------------------------------------------------------

    async def ask(self, question: str) -> ChatMessage:
        """Append the question, ask the backend about the current city, append the answer."""
        chat = self.state.chat
        chat.add_message(Role.USER, question)
        chat.set_loading(True)
        try:
            response = await self.assistant.chat(question, self.state.city.current_city)
        finally:
            chat.set_loading(False)
        return chat.add_message(Role.ASSISTANT, response.answer)

    # -- misc -----------------------------------------------------------------

    async def health(self) -> HealthStatus:
        return await self.health_api.check()

    async def close(self) -> None:
        await self.http.close()
        self.state.close()

    async def __aenter__(self) -> "AsyncWeatherDash":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()


class WeatherDash:
    """Sync wrapper around AsyncWeatherDash. Runs the event loop internally."""

    def __init__(self, **kwargs: Any):
        self._loop = asyncio.new_event_loop()
        self._async = AsyncWeatherDash(**kwargs)

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    @property
    def state(self) -> AppState:
        return self._async.state

    @property
    def favorite_list(self) -> list[CityDTO]:
        return self._async.favorite_list

    def refresh_weather(self, city: Optional[CityDTO] = None) -> None:
        self._run(self._async.refresh_weather(city))

    def search_cities(self, keyword: str) -> list[CityDTO]:
        return self._run(self._async.search_cities(keyword))

    def select_city(self, city: CityDTO, refresh: bool = True) -> None:
        self._run(self._async.select_city(city, refresh=refresh))

    def load_preferences(self) -> PreferenceDTO:
        return self._run(self._async.load_preferences())

    def save_preferences(self, prefs: PreferenceDTO) -> PreferenceDTO:
        return self._run(self._async.save_preferences(prefs))

    def load_favorites(self) -> list[CityDTO]:
        return self._run(self._async.load_favorites())

    def add_favorite(self, city: CityDTO) -> CityDTO:
        return self._run(self._async.add_favorite(city))

    def remove_favorite(self, city: CityDTO) -> None:
        self._run(self._async.remove_favorite(city))

    def ask(self, question: str) -> ChatMessage:
        return self._run(self._async.ask(question))

    def health(self) -> HealthStatus:
        return self._run(self._async.health())

    def close(self) -> None:
        self._run(self._async.close())
        self._loop.close()
