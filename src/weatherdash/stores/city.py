from weatherdash.models.city import DEFAULT_CITY, CityDTO
from weatherdash.stores.base import Store


class CityStore(Store):
    """The selected city. No history of earlier selections is kept."""

    name = "city"

    def __init__(self, default_city: CityDTO = DEFAULT_CITY):
        self._default_city = default_city
        super().__init__()

    def _initial_state(self) -> dict:
        return {"current_city": self._default_city}

    @property
    def current_city(self) -> CityDTO:
        return self._get("current_city")

    def set_current_city(self, city: CityDTO) -> None:
        self._set("current_city", city)
