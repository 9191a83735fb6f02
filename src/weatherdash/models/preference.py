"""
User preference model — a single row per user context.
"""

from typing import Optional

from weatherdash.models.base import WireModel


class PreferenceDTO(WireModel):
    id: Optional[int] = None   # absent until the backend has created the row
    default_city: str
    temperature_unit: str
    wind_speed_unit: str
    show_current_card: bool
    show_line_chart: bool
    show_bar_chart: bool
    show_gauge_card: bool
    show_alerts_card: bool
    show_ai_assistant: bool

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    @classmethod
    def defaults(cls) -> "PreferenceDTO":
        """Built-in defaults used until the backend's copy is fetched."""
        return cls(
            default_city="Beijing",
            temperature_unit="C",
            wind_speed_unit="m/s",
            show_current_card=True,
            show_line_chart=True,
            show_bar_chart=True,
            show_gauge_card=True,
            show_alerts_card=True,
            show_ai_assistant=True,
        )
