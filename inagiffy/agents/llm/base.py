## Base LLM Client Interface
from abc import ABC, abstractmethod


class LLMClient(ABC):
    provider_name: str = "LLM"

    @abstractmethod
    def generate_text(self, * , system: str, user: str, temperature: float = 0.2) -> str:
        raise NotImplementedError

    def ensure_configured(self) -> None:
        """
        Raise ConfigurationFailure when the client cannot possibly succeed,
        e.g. a hosted provider without an API key. Called once per request
        before any prompt is sent.
        """
        return None
