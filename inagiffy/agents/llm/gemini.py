from google import genai
from google.genai import types

from inagiffy.errors import ConfigurationFailure
from .base import LLMClient

class GeminiClient(LLMClient):
    provider_name = "Gemini"

    def __init__(self, * , api_key: str | None, model: str, timeout: float = 120):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self._client: genai.Client | None = None

    def ensure_configured(self) -> None:
        if not self.api_key:
            raise ConfigurationFailure(
                "Please set GEMINI_API_KEY in your environment variables",
                error="Gemini API key not configured",
            )

    @property
    def client(self) -> genai.Client:
        # genai.Client refuses to construct without a key, so build it on first use
        if self._client is None:
            self.ensure_configured()
            self._client = genai.Client(
                api_key=self.api_key,
                http_options=types.HttpOptions(timeout=int(self.timeout * 1000)),
            )
        return self._client

    def generate_text(self, *, system: str, user: str, temperature: float = 0.2) -> str:
        # Gemini gets a single combined prompt
        resp = self.client.models.generate_content(
            model=self.model,
            contents=f"{system}\n\n{user}",
            config=types.GenerateContentConfig(temperature=temperature),
        )
        return (resp.text or "").strip()
