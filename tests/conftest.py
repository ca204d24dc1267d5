"""Pytest configuration and fixtures."""

from typing import Any, Callable, Iterable, List

import pytest

from termprompts import Prompter, set_default_prompter
from termprompts.config import TermPromptsConfig
from termprompts.prompt.abstract import PromptBackend
from termprompts.prompt.dataclasses import PromptRequest


class ScriptedBackend(PromptBackend):
    """Simulated renderer that answers prompts from a script.

    Each scripted submission is either a value to submit or an exception to
    raise. Text submissions go through the request's validation hook the way
    a real renderer would: rejected submissions are recorded and the next one
    is tried, and the first accepted submission is returned.
    """

    def __init__(self, submissions: Iterable[Any]) -> None:
        super().__init__(TermPromptsConfig.make_default())
        self.submissions: List[Any] = list(submissions)
        self.requests: List[PromptRequest] = []
        self.rejections: List[str] = []

    def _next_submission(self) -> Any:
        if not self.submissions:
            raise EOFError("script exhausted")

        submission = self.submissions.pop(0)
        if isinstance(submission, BaseException):
            raise submission

        return submission

    async def prompt_confirm(self, request: PromptRequest) -> bool:
        self.requests.append(request)
        return self._next_submission()

    async def prompt_text(self, request: PromptRequest) -> str:
        self.requests.append(request)
        while True:
            candidate = self._next_submission()
            error_message = await request.validators.evaluate_message(candidate)
            if error_message is None:
                return candidate

            self.rejections.append(error_message)


@pytest.fixture
def make_backend() -> Callable[..., ScriptedBackend]:
    """Build a scripted backend from submissions."""

    def factory(*submissions: Any) -> ScriptedBackend:
        return ScriptedBackend(submissions)

    return factory


@pytest.fixture
def make_prompter(make_backend) -> Callable[..., Prompter]:
    """Build a Prompter over a scripted backend."""

    def factory(*submissions: Any) -> Prompter:
        return Prompter(make_backend(*submissions))

    return factory


@pytest.fixture(autouse=True)
def reset_default_prompter():
    """Keep tests from sharing the process-wide default prompter."""
    set_default_prompter(None)
    yield
    set_default_prompter(None)


@pytest.fixture(autouse=True)
def isolate_config(monkeypatch, tmp_path):
    """Point the config path at a temporary file."""
    monkeypatch.setenv("TERMPROMPTS_CONFIG", str(tmp_path / "config.json"))
