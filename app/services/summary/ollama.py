import json
import logging
import time
from typing import Iterable, Optional

import httpx

from app.core.config import settings
from app.core.exceptions import SummarizerError
from app.core.prompt.prompts import build_student_summary_prompt
from app.schemas.student import Student
from app.services.summary.base import Summarizer

logger = logging.getLogger(__name__)


class OllamaSummarizer(Summarizer):
    """
    Calls Ollama's /api/generate and stitches the streamed answer together.

    Ollama answers with JSON lines, each carrying a piece of text in
    "response" and a "done" flag on the last one. Reading stops at "done";
    the whole call is bounded by `timeout` seconds and `max_chunks` lines.
    """

    provider = "Ollama API"

    def __init__(
        self,
        base_url: str = settings.OLLAMA_BASE_URL,
        model: str = settings.OLLAMA_MODEL,
        timeout: float = settings.SUMMARY_TIMEOUT_SECONDS,
        max_chunks: int = settings.SUMMARY_MAX_CHUNKS,
        client: Optional[httpx.Client] = None,
    ):
        self.model = model
        self.timeout = timeout
        self.max_chunks = max_chunks
        self.client = client or httpx.Client(base_url=base_url, timeout=timeout)

    def summarize(self, student: Student) -> str:
        payload = {
            "model": self.model,
            "prompt": build_student_summary_prompt(student),
        }
        deadline = time.monotonic() + self.timeout

        try:
            with self.client.stream("POST", "/api/generate", json=payload) as response:
                if response.status_code >= 400:
                    response.read()
                    raise SummarizerError(
                        f"HTTP {response.status_code}: {response.text[:200]}",
                        provider=self.provider,
                    )
                return self._collect(response.iter_lines(), deadline)
        except httpx.HTTPError as e:
            logger.error(f"Error calling {self.provider}: {e!r}")
            raise SummarizerError(
                f"request failed ({e.__class__.__name__})",
                provider=self.provider,
            ) from e

    def _collect(self, lines: Iterable[str], deadline: float) -> str:
        parts = []
        count = 0
        for line in lines:
            if time.monotonic() > deadline:
                raise SummarizerError("Timed out reading response", provider=self.provider)
            if not line.strip():
                continue

            count += 1
            if count > self.max_chunks:
                raise SummarizerError(
                    f"Response exceeded {self.max_chunks} chunks", provider=self.provider
                )

            try:
                chunk = json.loads(line)
            except json.JSONDecodeError as e:
                raise SummarizerError(
                    "Error parsing response", provider=self.provider
                ) from e
            if not isinstance(chunk, dict):
                raise SummarizerError("Error parsing response", provider=self.provider)

            logger.debug(f"{self.provider} partial response: {chunk}")

            if chunk.get("error"):
                raise SummarizerError(str(chunk["error"]), provider=self.provider)
            text = chunk.get("response")
            if isinstance(text, str):
                parts.append(text)
            if chunk.get("done") is True:
                break
        else:
            raise SummarizerError("Stream ended before completion", provider=self.provider)

        summary = "".join(parts)
        if not summary:
            raise SummarizerError("No response", provider=self.provider)
        return summary

    def close(self) -> None:
        self.client.close()
