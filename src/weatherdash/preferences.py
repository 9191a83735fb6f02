"""
Preferences REST API.
"""

from weatherdash.models.preference import PreferenceDTO
from weatherdash.transport.http import HttpClient


class PreferencesAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def get(self) -> PreferenceDTO:
        """Current preferences. The backend creates a defaults row on first use."""
        return await self._http.get("/api/preferences", response_model=PreferenceDTO)

    async def update(self, prefs: PreferenceDTO) -> PreferenceDTO:
        """Full replace: every field is sent, there is no partial update."""
        return await self._http.put("/api/preferences", prefs, response_model=PreferenceDTO)
