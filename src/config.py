import os
from dotenv import load_dotenv

load_dotenv()


def _resolve_llm_api_key() -> str:
    """LLM_API_KEY wins; GROQ_API_KEY is accepted for the default provider."""
    explicit = os.getenv("LLM_API_KEY", "")
    if explicit:
        return explicit
    return os.getenv("GROQ_API_KEY", "")


class Config:
    PORT = int(os.getenv("PORT", 8000))
    DEBUG = os.getenv("DEBUG", "false").lower() == "true"
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")

    # Text-generation provider (OpenAI-compatible chat completions)
    LLM_API_KEY = _resolve_llm_api_key()
    LLM_BASE_URL = os.getenv("LLM_BASE_URL", "https://api.groq.com/openai/v1")
    MODEL_NAME = os.getenv("MODEL_NAME", "llama-3.1-8b-instant")
    LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.1"))
    LLM_TIMEOUT = float(os.getenv("LLM_TIMEOUT", "120"))


config = Config()
