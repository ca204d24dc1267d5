"""
module termprompts.prompter

Contains the definition of the Prompter class, which builds prompt requests for
confirmation, free-text, and password input and hands them to a prompt backend
"""

import logging
from typing import Any, Iterable

from .prompt.abstract import PromptBackend
from .prompt.dataclasses import PromptRequest
from .prompt.enums import PromptKind
from .prompt.exceptions import PromptException, RendererFault, UserExit
from .validation import Validator, ValidatorChain

logger = logging.getLogger(__name__)


class Prompter:
    """
    class Prompter

    Builds a fresh PromptRequest for every call and resolves it through the
    prompt backend it was constructed with. A Prompter holds no state between
    calls other than its backend
    """

    __backend: PromptBackend

    def __init__(self: "Prompter", backend: PromptBackend) -> None:
        self.__backend = backend

    @property
    def backend(self: "Prompter") -> PromptBackend:
        return self.__backend

    async def confirm(self: "Prompter", message: str, default: bool = False) -> bool:
        """
        Asks the user a yes/no question

        Args:
            message (str): The question to ask
            default (bool): The answer used when the user accepts without
                typing anything. Non-boolean values are treated as False

        Returns:
            bool: The user's answer

        Raises:
            RendererFault: If the backend failed, carrying the original message
            UserExit: If the user abandoned the prompt
        """

        return bool(
            await self._resolve(
                PromptRequest(
                    message=message,
                    kind=PromptKind.CONFIRM,
                    default=default if isinstance(default, bool) else False,
                )
            )
        )

    # pylint: disable=redefined-builtin
    async def input(
        self: "Prompter",
        message: str,
        validators: Validator | Iterable[Validator] | None = None,
        default: str | None = None,
        kind: PromptKind | str | None = None,
    ) -> str:
        """
        Asks the user for text input. The backend asks again until the
        answer passes every validator

        Args:
            message (str): The message to prompt the user with
            validators (Validator | Iterable[Validator] | None): A single
                validator or validators to run in order against each candidate
            default (str | None): The default or suggested input
            kind (PromptKind | str | None): The kind of input. Defaults to
                plain text input

        Returns:
            str: The accepted answer

        Raises:
            ValueError: If kind is not a text input kind
            TypeError: If any of the validators is not callable
            ValidatorFault: If a validator raised while checking a candidate
            RendererFault: If the backend failed, carrying the original message
            UserExit: If the user abandoned the prompt
        """

        prompt_kind: PromptKind = PromptKind.INPUT if kind is None else PromptKind(kind)
        if prompt_kind == PromptKind.CONFIRM:
            raise ValueError("Confirmation prompts take no validators; use confirm()")

        request: PromptRequest = PromptRequest(
            message=message,
            kind=prompt_kind,
            default=default,
            validators=ValidatorChain.from_validators(validators),
        )
        logger.debug(
            "prompting for %s with %d validator(s)",
            prompt_kind,
            len(request.validators),
        )

        return await self._resolve(request)

    async def password(
        self: "Prompter",
        message: str,
        validators: Validator | Iterable[Validator] | None = None,
    ) -> str:
        return await self.input(message, validators, None, PromptKind.PASSWORD)

    async def _resolve(self: "Prompter", request: PromptRequest) -> Any:
        try:
            return await self.backend.prompt_for(request)
        except PromptException:
            raise
        except (EOFError, KeyboardInterrupt) as exc:
            raise UserExit(f"{type(exc).__name__} while prompting for input") from exc
        # pylint: disable=broad-exception-caught
        except Exception as exc:
            logger.debug(
                "%s raised %s while rendering a %s prompt",
                type(self.backend).__name__,
                type(exc).__name__,
                request.kind,
            )
            raise RendererFault(str(exc)) from exc
