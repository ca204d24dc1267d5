"""
module termprompts.prompts

Contains the module-level confirm(), input(), and password() coroutines. They
delegate to a process-wide default Prompter that renders with prompt_toolkit
unless another one has been installed with set_default_prompter()
"""

from typing import Iterable

from .config import TermPromptsConfig
from .prompt.backends.prompt_toolkit import PromptToolkitBackend
from .prompt.enums import PromptKind
from .prompter import Prompter
from .validation import Validator

_default_prompter: Prompter | None = None


def default_prompter() -> Prompter:
    """
    Returns the process-wide default Prompter, creating it on first use with
    a PromptToolkitBackend and the current user's configuration

    Args:
        None

    Returns:
        Prompter: The default Prompter

    Raises:
        Nothing
    """

    # pylint: disable=global-statement
    global _default_prompter
    if _default_prompter is None:
        _default_prompter = Prompter(PromptToolkitBackend(TermPromptsConfig.load()))

    return _default_prompter


def set_default_prompter(prompter: Prompter | None) -> None:
    """
    Replaces the process-wide default Prompter. Passing None makes the next
    prompt create a fresh default

    Args:
        prompter (Prompter | None): The Prompter to use from now on

    Returns:
        Nothing

    Raises:
        Nothing
    """

    # pylint: disable=global-statement
    global _default_prompter
    _default_prompter = prompter


async def confirm(message: str, default: bool = False) -> bool:
    return await default_prompter().confirm(message, default)


# pylint: disable=redefined-builtin
async def input(
    message: str,
    validators: Validator | Iterable[Validator] | None = None,
    default: str | None = None,
    kind: PromptKind | str | None = None,
) -> str:
    return await default_prompter().input(message, validators, default, kind)


async def password(
    message: str, validators: Validator | Iterable[Validator] | None = None
) -> str:
    return await default_prompter().password(message, validators)
