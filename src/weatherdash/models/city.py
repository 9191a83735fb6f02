"""
City, favorite and chat request models.
"""

from typing import Optional

from weatherdash.models.base import WireModel

CityKey = tuple[str, str, float, float]


class CityDTO(WireModel):
    name: str
    country: str
    state: Optional[str] = None
    lat: float
    lon: float

    @property
    def key(self) -> CityKey:
        """Identity used for favorites and current-city comparison. There is no synthetic id."""
        return (self.name, self.country, self.lat, self.lon)

    def same_city(self, other: "CityDTO") -> bool:
        return self.key == other.key


DEFAULT_CITY = CityDTO(name="Beijing", country="CN", lat=39.9042, lon=116.4074)


class FavoriteCreateDTO(WireModel):
    """POST /api/favorites body"""
    name: str
    country: str
    state: Optional[str] = None
    lat: float
    lon: float

    @classmethod
    def from_city(cls, city: CityDTO) -> "FavoriteCreateDTO":
        return cls(name=city.name, country=city.country, state=city.state, lat=city.lat, lon=city.lon)
