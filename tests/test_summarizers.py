"""
Unit tests for the summarizer backends. No network access.
"""
import json
from types import SimpleNamespace

import httpx
import pytest

from app.api import deps
from app.core.exceptions import SummarizerError
from app.core.prompt.prompts import build_student_summary_prompt
from app.schemas.student import Student
from app.services.summary.base import TemplateSummarizer
from app.services.summary.chat import ChatSummarizer
from app.services.summary.ollama import OllamaSummarizer


@pytest.fixture
def student():
    return Student(id=1, name="Ann", age=20, course="CS", email="a@x.com")


def ndjson(*chunks):
    return "".join(json.dumps(chunk) + "\n" for chunk in chunks).encode()


def ollama_with(handler, **kwargs):
    client = httpx.Client(base_url="http://ollama.test", transport=httpx.MockTransport(handler))
    return OllamaSummarizer(model="llama3.2", client=client, **kwargs)


def respond_with(body, status_code=200):
    def handler(request):
        return httpx.Response(status_code, content=body)
    return handler


class TestPrompt:
    def test_prompt_embeds_every_field(self, student):
        prompt = build_student_summary_prompt(student)
        assert prompt.startswith("Please generate a detailed summary of the student")
        assert "Name: Ann, Age: 20, Course: CS, Email: a@x.com." in prompt


class TestTemplateSummarizer:
    def test_renders_fields(self, student):
        text = TemplateSummarizer().summarize(student)
        assert text == "Ann is 20 years old and is enrolled in CS. They can be reached at a@x.com."


class TestOllamaSummarizer:
    def test_posts_model_and_prompt(self, student):
        seen = {}

        def handler(request):
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, content=ndjson({"response": "ok", "done": True}))

        assert ollama_with(handler).summarize(student) == "ok"
        assert seen["path"] == "/api/generate"
        assert seen["body"] == {
            "model": "llama3.2",
            "prompt": build_student_summary_prompt(student),
        }

    def test_joins_stream_until_done(self, student):
        body = ndjson(
            {"response": "Ann ", "done": False},
            {"response": "studies ", "done": False},
            {"response": "CS.", "done": True},
            {"response": " ignored", "done": False},
        )
        assert ollama_with(respond_with(body)).summarize(student) == "Ann studies CS."

    def test_blank_lines_are_skipped(self, student):
        body = b'\n{"response": "hi", "done": false}\n\n{"done": true}\n'
        assert ollama_with(respond_with(body)).summarize(student) == "hi"

    def test_empty_response_fails(self, student):
        body = ndjson({"response": "", "done": True})
        with pytest.raises(SummarizerError, match="No response"):
            ollama_with(respond_with(body)).summarize(student)

    def test_stream_without_done_fails(self, student):
        body = ndjson({"response": "partial", "done": False})
        with pytest.raises(SummarizerError, match="ended before completion"):
            ollama_with(respond_with(body)).summarize(student)

    def test_invalid_json_line_fails(self, student):
        with pytest.raises(SummarizerError, match="parsing"):
            ollama_with(respond_with(b"not json\n")).summarize(student)

    def test_error_line_fails(self, student):
        body = ndjson({"error": "model 'llama3.2' not found"})
        with pytest.raises(SummarizerError, match="not found"):
            ollama_with(respond_with(body)).summarize(student)

    def test_http_error_status_fails(self, student):
        with pytest.raises(SummarizerError, match="HTTP 500"):
            ollama_with(respond_with(b"boom", status_code=500)).summarize(student)

    def test_chunk_cap(self, student):
        body = ndjson(*[{"response": "x", "done": False} for _ in range(10)])
        with pytest.raises(SummarizerError, match="exceeded 5 chunks"):
            ollama_with(respond_with(body), max_chunks=5).summarize(student)

    def test_connection_error_is_wrapped(self, student):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(SummarizerError) as exc_info:
            ollama_with(handler).summarize(student)
        assert exc_info.value.status_code == 500
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_timeout_is_wrapped(self, student):
        def handler(request):
            raise httpx.ReadTimeout("too slow", request=request)

        with pytest.raises(SummarizerError, match="ReadTimeout"):
            ollama_with(handler).summarize(student)

    def test_deadline_stops_reading(self, student):
        body = ndjson({"response": "x", "done": False}, {"done": True})
        with pytest.raises(SummarizerError, match="Timed out"):
            ollama_with(respond_with(body), timeout=-1).summarize(student)


class FakeLLM:
    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    def invoke(self, prompt):
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return SimpleNamespace(content=self.reply)


class TestChatSummarizer:
    def test_returns_model_content(self, student):
        llm = FakeLLM(reply="Ann is a CS student.")
        assert ChatSummarizer(llm=llm).summarize(student) == "Ann is a CS student."
        assert llm.prompts == [build_student_summary_prompt(student)]

    def test_content_blocks_are_joined(self, student):
        llm = FakeLLM(reply=[{"type": "text", "text": "Ann "}, "studies CS."])
        assert ChatSummarizer(llm=llm).summarize(student) == "Ann studies CS."

    def test_empty_content_fails(self, student):
        with pytest.raises(SummarizerError, match="No response"):
            ChatSummarizer(llm=FakeLLM(reply="  ")).summarize(student)

    def test_client_error_is_wrapped(self, student):
        with pytest.raises(SummarizerError, match="rate limited"):
            ChatSummarizer(llm=FakeLLM(error=RuntimeError("rate limited"))).summarize(student)


class TestBackendSelection:
    @pytest.fixture(autouse=True)
    def reset_cache(self):
        deps.get_summarizer.cache_clear()
        yield
        deps.get_summarizer.cache_clear()

    @pytest.mark.parametrize(
        "backend, expected",
        [
            ("ollama", OllamaSummarizer),
            ("openai", ChatSummarizer),
            ("template", TemplateSummarizer),
        ],
    )
    def test_backend_from_settings(self, monkeypatch, backend, expected):
        monkeypatch.setattr(deps.settings, "SUMMARIZER_BACKEND", backend)
        assert isinstance(deps.get_summarizer(), expected)
