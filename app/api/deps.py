from functools import lru_cache

from app.core.config import settings
from app.services.student.store import StudentStore, student_store
from app.services.summary.base import Summarizer, TemplateSummarizer
from app.services.summary.chat import ChatSummarizer
from app.services.summary.ollama import OllamaSummarizer


def get_store() -> StudentStore:
    """
    Dependency returning the process-wide student store.
    Tests swap it through app.dependency_overrides.
    """
    return student_store


@lru_cache(maxsize=1)
def get_summarizer() -> Summarizer:
    """Dependency returning the summarizer picked by SUMMARIZER_BACKEND."""
    backend = settings.SUMMARIZER_BACKEND
    if backend == "openai":
        return ChatSummarizer()
    if backend == "template":
        return TemplateSummarizer()
    return OllamaSummarizer()
