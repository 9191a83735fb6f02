"""
City search REST API. Ranking of candidates is the backend's business.
"""

from weatherdash.models.city import CityDTO
from weatherdash.transport.http import HttpClient


class CitiesAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def search(self, keyword: str) -> list[CityDTO]:
        return await self._http.get("/api/cities/search", {"keyword": keyword}, response_model=list[CityDTO])
