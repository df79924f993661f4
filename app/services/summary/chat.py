import logging

from app.core.exceptions import SummarizerError
from app.core.llm import get_llm
from app.core.prompt.prompts import build_student_summary_prompt
from app.schemas.student import Student
from app.services.summary.base import Summarizer

logger = logging.getLogger(__name__)


class ChatSummarizer(Summarizer):
    """OpenAI-compatible chat model through LangChain."""

    provider = "LLM"

    def __init__(self, llm=None):
        self._llm = llm

    @property
    def llm(self):
        if self._llm is None:
            self._llm = get_llm()
        return self._llm

    def summarize(self, student: Student) -> str:
        prompt = build_student_summary_prompt(student)
        try:
            message = self.llm.invoke(prompt)
        except Exception as e:
            logger.error(f"{self.provider} call failed: {e}")
            raise SummarizerError(str(e), provider=self.provider) from e

        content = getattr(message, "content", message)
        if isinstance(content, list):
            # content blocks: keep the text parts only
            content = "".join(
                block if isinstance(block, str) else block.get("text", "")
                for block in content
            )
        if not isinstance(content, str) or not content.strip():
            raise SummarizerError("No response", provider=self.provider)
        return content
