from abc import ABC, abstractmethod

from app.core.prompt.prompts import render_student_summary
from app.schemas.student import Student


class Summarizer(ABC):
    """Turns one student record into a short natural-language text."""

    provider: str = "summarizer"

    @abstractmethod
    def summarize(self, student: Student) -> str:
        """
        Return the summary text.

        Raises SummarizerError when no text could be produced.
        Must not be called while holding the store lock.
        """

    def close(self) -> None:
        """Release network resources. Nothing to do by default."""


class TemplateSummarizer(Summarizer):
    """Local backend: fills a fixed sentence, never touches the network."""

    provider = "template"

    def summarize(self, student: Student) -> str:
        return render_student_summary(student)
