"""
HTTP client for the remote chat service (POST {base_url}/chat/enhanced).
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from focus.core.llm import TextRequest, TextService

CHAT_PATH = "/chat/enhanced"


class HttpTextService(TextService):
    def __init__(
        self,
        base_url: str,
        *,
        token: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def invoke(self, request: TextRequest) -> dict[str, Any]:
        """Send one instruction; raises httpx errors on transport failure or non-2xx status."""
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.post(
                f"{self.base_url}{CHAT_PATH}",
                json=request.model_dump(),
                headers=self._headers(),
            )
            response.raise_for_status()
            payload = response.json()
        return payload if isinstance(payload, dict) else {"reply": payload}
