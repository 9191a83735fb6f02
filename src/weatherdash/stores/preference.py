from weatherdash.models.preference import PreferenceDTO
from weatherdash.stores.base import Store


class PreferenceStore(Store):
    """Local copy of the user's preferences; starts from built-in defaults until the backend's copy is applied."""

    name = "preference"

    def _initial_state(self) -> dict:
        return {"preferences": PreferenceDTO.defaults()}

    @property
    def preferences(self) -> PreferenceDTO:
        return self._get("preferences")

    def set_preferences(self, prefs: PreferenceDTO) -> None:
        self._set("preferences", prefs)
