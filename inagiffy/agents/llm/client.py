from inagiffy.settings import settings
from inagiffy.agents.llm.base import LLMClient
from inagiffy.agents.llm.gemini import GeminiClient
from inagiffy.agents.llm.groq import GroqOpenAIClient
from inagiffy.agents.llm.ollama import OllamaOpenAIClient

def get_llm_client() -> LLMClient:
    provider = settings.LLM_PROVIDER.lower()

    if provider == "groq":
        return GroqOpenAIClient(
            api_key=settings.GROQ_API_KEY,
            base_url=settings.GROQ_BASE_URL,
            model=settings.GROQ_MODEL,
            timeout=settings.LLM_TIMEOUT_SECONDS,
        )

    if provider == "ollama":
        return OllamaOpenAIClient(
            base_url = settings.ollama_base_url,
            model = settings.ollama_model,
            timeout = settings.LLM_TIMEOUT_SECONDS,
        )

    return GeminiClient(
        api_key=settings.GEMINI_API_KEY,
        model=settings.GEMINI_MODEL,
        timeout=settings.LLM_TIMEOUT_SECONDS,
    )
