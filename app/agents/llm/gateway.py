import logging

import httpx

from app.agents.llm.base import LLMClient
from app.errors import UpstreamError

logger = logging.getLogger(__name__)


class GatewayChatClient(LLMClient):
    def __init__(self, * , api_key: str, url: str, model: str,
    timeout: float = 120, transport: httpx.AsyncBaseTransport | None = None):
        self.api_key = api_key
        self.url = url
        self.model = model
        self.timeout = timeout
        self.transport = transport

    async def generate_text(self, * , system: str, user: str) -> str:
        # POST {url} with OpenAI chat-completions message format
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
        }

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                r = await client.post(self.url, json=payload, headers=headers)
            except httpx.HTTPError as e:
                logger.error("AI gateway unreachable: %r", e)
                raise UpstreamError() from e

            if not r.is_success:
                error_text = r.text
                logger.error("AI gateway error: %s %s", r.status_code, error_text)
                raise UpstreamError(status_code=r.status_code, body=error_text)

            data = r.json()

        return _first_choice_content(data)


def _first_choice_content(data) -> str:
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return ""
    return content or ""
