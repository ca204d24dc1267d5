"""
module termprompts.prompt.abstract.promptbackend

Contains the definition of the PromptBackend class, an abstract base class that
is extended by all termprompts prompt integrations (i.e., prompt_toolkit)
"""

from abc import ABCMeta, abstractmethod
from typing import Any

from ..dataclasses import PromptRequest
from ..enums import PromptKind
from ...config import TermPromptsConfig


class PromptBackend(metaclass=ABCMeta):
    """
    class PromptBackend

    Abstract base class that is extended by all termprompts prompt
    integrations (i.e., prompt_toolkit). A backend owns the terminal while a
    prompt is displayed and is solely responsible for asking again when a
    candidate answer fails validation
    """

    config: TermPromptsConfig

    def __init__(
        self: "PromptBackend", config: TermPromptsConfig | None = None
    ) -> None:
        self.config = config if config is not None else TermPromptsConfig.make_default()

    @abstractmethod
    async def prompt_confirm(self: "PromptBackend", request: PromptRequest) -> bool:
        """
        Asks the user a yes/no question

        Args:
            request (PromptRequest): The request to render. Its default is the
                answer used when the user accepts without typing anything

        Returns:
            bool: The user's answer

        Raises:
            Exception: Client classes may raise exceptions
        """

    async def prompt_for(self: "PromptBackend", request: PromptRequest) -> Any:
        """
        Prompts the user according to the kind of the provided request

        Args:
            request (PromptRequest): The request to render

        Returns:
            Any: A bool for confirm requests, otherwise the accepted text

        Raises:
            NotImplementedError: If the request kind is not supported
            Exception: Client classes may raise exceptions
        """

        match request.kind:
            case PromptKind.CONFIRM:
                return await self.prompt_confirm(request)
            case PromptKind.INPUT | PromptKind.PASSWORD:
                return await self.prompt_text(request)
            case _:
                raise NotImplementedError(f"Prompt kind {request.kind} not implemented")

    @abstractmethod
    async def prompt_text(self: "PromptBackend", request: PromptRequest) -> str:
        """
        Asks the user for text input, masking it for password requests. The
        backend must await request.validators.evaluate_message() on its own event
        loop with each submitted candidate and only return a candidate that was
        accepted

        Args:
            request (PromptRequest): The request to render

        Returns:
            str: The accepted answer

        Raises:
            ValidatorFault: If a validator raised while checking a candidate
            Exception: Client classes may raise exceptions
        """
