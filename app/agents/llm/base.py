## Base LLM Client Interface
from abc import ABC, abstractmethod

class LLMClient(ABC):
    @abstractmethod
    async def generate_text(self, * , system: str, user: str) -> str:
        """
        Send one system + user exchange and return the reply text.
        Implementations return "" when the reply carries no content.
        """
        raise NotImplementedError
