"""
Every backend response is wrapped in {code, message, data, timestamp}.
"""

from typing import Any, Optional

from pydantic import BaseModel

SUCCESS_CODE = 0


class Envelope(BaseModel):
    code: int
    message: Optional[str] = None
    data: Optional[Any] = None   # omitted by the backend when null
    timestamp: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.code == SUCCESS_CODE
