from weatherdash.models.health import HealthStatus
from weatherdash.transport.http import HttpClient


class HealthAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def check(self) -> HealthStatus:
        """Liveness probe."""
        return await self._http.get("/api/health", response_model=HealthStatus)
