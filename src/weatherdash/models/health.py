from weatherdash.models.base import WireModel


class HealthStatus(WireModel):
    """GET /api/health payload"""
    status: str
    service: str
    version: str

    @property
    def up(self) -> bool:
        return self.status.lower() in ("ok", "up")
