import httpx

from app.settings import Settings
from app.agents.llm.gateway import GatewayChatClient
from app.errors import ConfigurationError

def get_llm_client(settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
    if not settings.LOVABLE_API_KEY:
        raise ConfigurationError("LOVABLE_API_KEY is not configured")

    return GatewayChatClient(
        api_key=settings.LOVABLE_API_KEY,
        url=settings.AI_GATEWAY_URL,
        model=settings.AI_MODEL,
        timeout=settings.REQUEST_TIMEOUT_SECONDS,
        transport=transport,
    )
