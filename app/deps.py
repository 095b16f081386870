## Shared request dependencies
import httpx
from fastapi import Request

from app.settings import Settings

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_transport() -> httpx.AsyncBaseTransport | None:
    # None lets httpx open a real connection; tests override this
    return None
