import httpx
from inagiffy.agents.llm.base import LLMClient

class OllamaOpenAIClient(LLMClient):
    """Local Ollama server through its OpenAI-compatible chat endpoint. No credential."""

    provider_name = "Ollama"

    def __init__(self, base_url: str, model: str, timeout: float = 120,
                 transport: httpx.BaseTransport | None = None):
        self.endpoint = f"{base_url.rstrip('/')}/chat/completions"
        self.model = model
        self.timeout = timeout
        self.transport = transport

    def _payload(self, system: str, user: str, temperature: float) -> dict:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            "temperature": temperature,
            # both roadmap prompts expect a single JSON object back
            "response_format": {"type": "json_object"},
            "stream": False,
        }

    def generate_text(self, * , system: str, user: str, temperature: float = 0.2) -> str:
        with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
            r = client.post(
                self.endpoint,
                json=self._payload(system, user, temperature),
                # Ollama ignores the key but OpenAI-style proxies in front of it may not
                headers={"Authorization": "Bearer ollama"},
            )
            r.raise_for_status()
            data = r.json()

        choices = data.get("choices") or []
        if not choices:
            raise ValueError(f"Ollama returned no choices for model {self.model}")
        return (choices[0].get("message", {}).get("content") or "").strip()
