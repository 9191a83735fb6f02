"""
Favorites REST API. Favorites are addressed by (name, country, lat, lon), not by id.
"""

from weatherdash.models.city import CityDTO, FavoriteCreateDTO
from weatherdash.transport.http import HttpClient


class FavoritesAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def list(self) -> list[CityDTO]:
        return await self._http.get("/api/favorites", response_model=list[CityDTO])

    async def add(self, favorite: FavoriteCreateDTO) -> CityDTO:
        """Duplicates are not filtered here; the backend decides."""
        return await self._http.post("/api/favorites", favorite, response_model=CityDTO)

    async def remove(self, name: str, country: str, lat: float, lon: float) -> None:
        await self._http.delete("/api/favorites", {"name": name, "country": country, "lat": lat, "lon": lon})
