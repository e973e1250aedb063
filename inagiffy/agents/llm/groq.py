from openai import OpenAI

from inagiffy.errors import ConfigurationFailure
from .base import LLMClient

class GroqOpenAIClient(LLMClient):
    provider_name = "Groq"

    def __init__(self, * , api_key: str | None, base_url: str, model: str, timeout: float = 120):
        self.api_key = api_key
        self.base_url = base_url
        self.model = model
        self.timeout = timeout
        self._client: OpenAI | None = None

    def ensure_configured(self) -> None:
        if not self.api_key:
            raise ConfigurationFailure(
                "Please set GROQ_API_KEY in your environment variables",
                error="Groq API key not configured",
            )

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            self.ensure_configured()
            self._client = OpenAI(api_key=self.api_key, base_url=self.base_url, timeout=self.timeout)
        return self._client

    def generate_text(self, *, system: str, user: str, temperature: float = 0.2) -> str:
        resp = self.client.chat.completions.create(
            model=self.model,
            temperature=temperature,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
        )
        return (resp.choices[0].message.content or "").strip()
