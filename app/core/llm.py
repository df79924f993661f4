from functools import lru_cache

from langchain_openai import ChatOpenAI
from app.core.config import settings


@lru_cache(maxsize=1)
def get_llm() -> ChatOpenAI:
    """Chat model for the "openai" summarizer backend, built on first use."""
    return ChatOpenAI(
        model=settings.LLM_MODEL,
        temperature=0,
        timeout=settings.SUMMARY_TIMEOUT_SECONDS,
        max_retries=0,
        base_url=settings.LLM_BASE_URL or None,
        api_key=settings.LLM_API_KEY,
    )
