## Application settings configuration

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: str = "dev"

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 3001
    FRONTEND_URL: str = "*"
    API_URL: str = "/api"
    LOG_LEVEL: str = "INFO"

    # Request budget, checked between generation stages
    GENERATION_TIMEOUT_SECONDS: float = 90.0

    # LLM settings
    LLM_PROVIDER: str = "gemini"
    LLM_TIMEOUT_SECONDS: float = 120.0
    LLM_TEMPERATURE: float = 0.2

    GEMINI_API_KEY: str | None = None
    GEMINI_MODEL: str = "gemini-2.5-flash"

    GROQ_API_KEY: str | None = None
    GROQ_BASE_URL: str = "https://api.groq.com/openai/v1"
    GROQ_MODEL: str = "llama-3.1-8b-instant"

    # Ollama settings
    ollama_base_url: str = "http://localhost:11434/v1"
    ollama_model: str = "llama3.1"


settings = Settings()
