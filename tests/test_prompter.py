"""Tests for the Prompter."""

import asyncio

import pytest

from termprompts.prompt.enums import PromptKind
from termprompts.prompt.exceptions import (
    PromptException,
    RendererFault,
    UserExit,
    ValidatorFault,
)


async def at_least_8(answer):
    return True if len(answer) >= 8 else "Password must be at least 8 characters"


class TestInput:
    """Test Prompter.input()."""

    @pytest.mark.asyncio
    async def test_returns_renderer_text_with_default(self, make_prompter):
        """The default reaches the renderer unchanged."""
        prompter = make_prompter("Alice")

        assert await prompter.input("Name?", None, "Bob") == "Alice"

        request = prompter.backend.requests[0]
        assert request.message == "Name?"
        assert request.default == "Bob"
        assert request.kind == PromptKind.INPUT
        assert len(request.validators) == 0

    @pytest.mark.asyncio
    async def test_single_validator_is_chained(self, make_prompter):
        prompter = make_prompter("", "value")

        async def required(answer):
            return True if answer else "Required"

        assert await prompter.input("Value?", required) == "value"
        assert prompter.backend.rejections == ["Required"]

    @pytest.mark.asyncio
    async def test_string_kind_is_accepted(self, make_prompter):
        prompter = make_prompter("hunter22")

        await prompter.input("Secret?", kind="password")

        assert prompter.backend.requests[0].kind == PromptKind.PASSWORD

    @pytest.mark.asyncio
    async def test_confirm_kind_rejected(self, make_prompter):
        with pytest.raises(ValueError):
            await make_prompter().input("Sure?", kind=PromptKind.CONFIRM)

    @pytest.mark.asyncio
    async def test_unknown_kind_rejected(self, make_prompter):
        with pytest.raises(ValueError):
            await make_prompter().input("Sure?", kind="checkbox")

    @pytest.mark.asyncio
    async def test_renderer_failure_is_wrapped(self, make_prompter):
        """Renderer failures on text prompts are wrapped like confirm's."""
        prompter = make_prompter(OSError("stdin closed"))

        with pytest.raises(RendererFault, match="stdin closed") as exc_info:
            await prompter.input("Name?")

        assert isinstance(exc_info.value.__cause__, OSError)

    @pytest.mark.asyncio
    async def test_validator_fault_aborts(self, make_prompter):
        """A raising validator aborts the prompt instead of re-prompting."""
        prompter = make_prompter("first", "second")

        async def broken(answer):
            raise RuntimeError("database unavailable")

        with pytest.raises(ValidatorFault, match="database unavailable"):
            await prompter.input("Name?", [broken])

        assert prompter.backend.submissions == ["second"]

    @pytest.mark.asyncio
    async def test_validator_awaits_task_on_callers_loop(self, make_prompter):
        """Validators run on the loop that awaits the prompt."""
        prompter = make_prompter("alice")

        async def fetch_users():
            return {"alice", "bob"}

        users = asyncio.get_running_loop().create_task(fetch_users())

        async def known_user(answer):
            return answer in await users or "Unknown user"

        assert await prompter.input("User?", [known_user]) == "alice"
        assert prompter.backend.rejections == []

    @pytest.mark.parametrize("interrupt", [EOFError(), KeyboardInterrupt()])
    @pytest.mark.asyncio
    async def test_interrupts_become_user_exit(self, make_prompter, interrupt):
        with pytest.raises(UserExit):
            await make_prompter(interrupt).input("Name?")


class TestPassword:
    """Test Prompter.password()."""

    @pytest.mark.asyncio
    async def test_short_password_is_reprompted(self, make_prompter):
        """A short password is rejected with the validator's message."""
        prompter = make_prompter("abc", "abcdefgh")

        assert await prompter.password("Secret?", [at_least_8]) == "abcdefgh"
        assert prompter.backend.rejections == [
            "Password must be at least 8 characters"
        ]

    @pytest.mark.asyncio
    async def test_request_has_no_default(self, make_prompter):
        prompter = make_prompter("abcdefgh")

        await prompter.password("Secret?", [at_least_8])

        request = prompter.backend.requests[0]
        assert request.kind == PromptKind.PASSWORD
        assert request.default is None
        assert len(request.validators) == 1

    @pytest.mark.asyncio
    async def test_accepted_immediately(self, make_prompter):
        prompter = make_prompter("abcdefgh")

        assert await prompter.password("Secret?", at_least_8) == "abcdefgh"
        assert prompter.backend.rejections == []


class TestConfirm:
    """Test Prompter.confirm()."""

    @pytest.mark.asyncio
    async def test_returns_renderer_answer(self, make_prompter):
        prompter = make_prompter(True)

        assert await prompter.confirm("Proceed?", True) is True

        request = prompter.backend.requests[0]
        assert request.kind == PromptKind.CONFIRM
        assert request.default is True

    @pytest.mark.asyncio
    async def test_default_is_false(self, make_prompter):
        prompter = make_prompter(False)

        assert await prompter.confirm("Proceed?") is False
        assert prompter.backend.requests[0].default is False

    @pytest.mark.asyncio
    async def test_non_boolean_default_falls_back(self, make_prompter):
        prompter = make_prompter(True)

        await prompter.confirm("Proceed?", "yes")

        assert prompter.backend.requests[0].default is False

    @pytest.mark.parametrize(
        "message", ["terminal unavailable", "stream closed", "", "ünïcode"]
    )
    @pytest.mark.asyncio
    async def test_renderer_failure_keeps_message(self, make_prompter, message):
        """Renderer failures surface with the original message."""
        prompter = make_prompter(RuntimeError(message))

        with pytest.raises(PromptException) as exc_info:
            await prompter.confirm("Proceed?")

        assert isinstance(exc_info.value, RendererFault)
        assert str(exc_info.value) == message
        assert str(exc_info.value.__cause__) == message

    @pytest.mark.asyncio
    async def test_prompt_exceptions_pass_through(self, make_prompter):
        """Exceptions that already are prompt exceptions are not re-wrapped."""
        original = UserExit("bye")
        prompter = make_prompter(original)

        with pytest.raises(UserExit) as exc_info:
            await prompter.confirm("Proceed?")

        assert exc_info.value is original
