"""
AI assistant REST API. One question in, one complete answer out; no streaming.
"""

from weatherdash.models.chat import ChatRequestDTO, ChatResponseDTO
from weatherdash.models.city import CityDTO
from weatherdash.transport.http import HttpClient


class AssistantAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def chat(self, question: str, city: CityDTO) -> ChatResponseDTO:
        return await self._http.post(
            "/api/ai/chat", ChatRequestDTO(question=question, city=city), response_model=ChatResponseDTO,
        )
