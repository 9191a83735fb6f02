"""
One instance of every store, built once and torn down explicitly.
"""

from typing import Optional

from weatherdash.models.city import DEFAULT_CITY, CityDTO
from weatherdash.stores.base import Store
from weatherdash.stores.chat import ChatStore
from weatherdash.stores.city import CityStore
from weatherdash.stores.preference import PreferenceStore
from weatherdash.stores.weather import WeatherStore


class AppState:
    def __init__(self, default_city: CityDTO = DEFAULT_CITY, chat: Optional[ChatStore] = None):
        self.weather = WeatherStore()
        self.city = CityStore(default_city)
        self.preference = PreferenceStore()
        self.chat = chat or ChatStore()
        self._closed = False

    @property
    def stores(self) -> tuple[Store, ...]:
        return (self.weather, self.city, self.preference, self.chat)

    @property
    def closed(self) -> bool:
        return self._closed

    def reset(self) -> None:
        for store in self.stores:
            store.reset()

    def close(self) -> None:
        if self._closed:
            return
        for store in self.stores:
            store.close()
        self._closed = True
