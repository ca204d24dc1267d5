"""
module termprompts.prompt.backends.prompt_toolkit.prompttoolkitbackend

Contains the definition of the PromptToolkitBackend class, a prompt backend that
renders prompts with prompt_toolkit
"""

from typing import Any, Dict, List, Tuple

from prompt_toolkit import PromptSession
from prompt_toolkit.application import get_app
from prompt_toolkit.buffer import Buffer, ValidationState
from prompt_toolkit.document import Document
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.key_binding.key_processor import KeyPressEvent
from prompt_toolkit.keys import Keys
from prompt_toolkit.styles import (
    BaseStyle,
    merge_styles,
    Style,
    style_from_pygments_cls,
)
from prompt_toolkit.validation import Validator, ValidationError
from pygments.styles import get_style_by_name, get_all_styles

from .... import constants
from ...abstract.promptbackend import PromptBackend
from ....config import TermPromptsConfig
from ...dataclasses import PromptRequest
from ...enums import PromptKind
from ....termpromptsexception import TermPromptsException
from ....validation import ValidatorChain


def _abort_prompt(fault: TermPromptsException) -> None:
    # a faulting validator ends the whole prompt instead of asking again
    app = get_app()
    if not app.is_done:
        app.exit(exception=fault)


class _ValidatorChainAdapter(Validator):
    __validators: ValidatorChain

    def __init__(self: "_ValidatorChainAdapter", validators: ValidatorChain) -> None:
        self.__validators = validators

    def validate(self: "_ValidatorChainAdapter", document: Document) -> None:
        # accepting is validated by the enter binding on the prompt's own loop, which
        # marks the buffer valid before handing it to the accept handler
        ...

    async def validate_async(
        self: "_ValidatorChainAdapter", document: Document
    ) -> None:
        try:
            error_message: str | None = await self.__validators.evaluate_message(
                document.text
            )
        except TermPromptsException as fault:
            _abort_prompt(fault)
            raise ValidationError(document.cursor_position, message=str(fault)) from fault

        if error_message is not None:
            raise ValidationError(document.cursor_position, message=error_message)


class PromptToolkitBackend(PromptBackend):
    __session_args: Tuple
    __session_kwargs: Dict

    def __init__(
        self: "PromptToolkitBackend",
        config: TermPromptsConfig | None = None,
        *args: Tuple,
        **kwargs: Dict,
    ) -> None:
        super().__init__(config=config)

        # extra arguments are handed to every PromptSession this backend creates
        # (i.e., input= and output= to render somewhere other than the terminal)
        self.__session_args = args
        self.__session_kwargs = kwargs

    def _default_style(self: "PromptToolkitBackend") -> BaseStyle:
        return merge_styles(
            [
                style_from_pygments_cls(self._get_style_for_config()),
                Style.from_dict(
                    {
                        "prompt.message": "bold",
                        "prompt.hint": "fg:ansibrightblack",
                        "validation-toolbar": "bg:ansired fg:ansiwhite",
                    }
                ),
            ]
        )

    def _get_style_for_config(self: "PromptToolkitBackend") -> Any:
        return (
            get_style_by_name(self.config.color_scheme)
            if self.config.color_scheme in get_all_styles()
            else get_style_by_name(constants.DEFAULT_COLOR_SCHEME)
        )

    def _make_session(self: "PromptToolkitBackend") -> PromptSession:
        return PromptSession(
            *self.__session_args,  # type: ignore
            erase_when_done=self.config.erase_when_done,
            style=self._default_style(),
            **self.__session_kwargs,
        )

    @staticmethod
    def _prompt_message(message: str, hint: str = "") -> FormattedText:
        fragments: List[Tuple[str, str]] = [("class:prompt.message", message)]
        if hint:
            fragments.append(("class:prompt.hint", f" {hint}"))

        fragments.append(("", " "))
        return FormattedText(fragments)

    async def prompt_confirm(
        self: "PromptToolkitBackend", request: PromptRequest
    ) -> bool:
        default: bool = request.default if isinstance(request.default, bool) else False

        def _yes_no_validator(user_input: str) -> bool:
            normalized: str = user_input.lower().strip()
            return len(normalized) == 0 or normalized in constants.YES_NO_VALUES

        answer: str = await self._make_session().prompt_async(
            self._prompt_message(request.message, "[Y/n]" if default else "[y/N]"),
            validator=Validator.from_callable(
                _yes_no_validator, error_message="Please enter 'yes' or 'no'"
            ),
            validate_while_typing=False,
        )

        if len(normalized_answer := answer.lower().strip()) == 0:
            return default

        return constants.YES_NO_VALUES[normalized_answer]

    @staticmethod
    def _accept_bindings(validators: ValidatorChain) -> KeyBindings:
        """
        Builds key bindings that run the validator chain when the user presses
        Enter. The handler is a coroutine, so prompt_toolkit runs it as a task on
        the prompt's event loop and validators can await anything on that loop.

        Args:
            validators (ValidatorChain): The chain an answer must pass

        Returns:
            KeyBindings: Bindings to merge into the prompt session
        """

        bindings: KeyBindings = KeyBindings()

        @bindings.add(Keys.Enter)
        async def binding_enter(event: KeyPressEvent) -> None:
            buffer: Buffer = event.current_buffer
            candidate: str = buffer.text

            try:
                error_message: str | None = await validators.evaluate_message(
                    candidate
                )
            except TermPromptsException as fault:
                _abort_prompt(fault)
                return

            # the answer was edited while the chain ran (the next Enter checks it)
            # or an earlier Enter already finished the prompt
            if buffer.text != candidate or event.app.is_done:
                return

            if error_message is not None:
                buffer.validation_error = ValidationError(
                    buffer.cursor_position, message=error_message
                )
                buffer.validation_state = ValidationState.INVALID
                return

            buffer.validation_error = None
            buffer.validation_state = ValidationState.VALID
            buffer.validate_and_handle()

        return bindings

    async def prompt_text(self: "PromptToolkitBackend", request: PromptRequest) -> str:
        if len(request.validators) == 0:
            return await self._make_session().prompt_async(
                self._prompt_message(request.message),
                default="" if request.default is None else str(request.default),
                is_password=request.kind == PromptKind.PASSWORD,
            )

        return await self._make_session().prompt_async(
            self._prompt_message(request.message),
            default="" if request.default is None else str(request.default),
            is_password=request.kind == PromptKind.PASSWORD,
            key_bindings=self._accept_bindings(request.validators),
            validator=_ValidatorChainAdapter(request.validators),
            validate_while_typing=self.config.validate_while_typing,
        )
