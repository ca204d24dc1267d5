"""
module termprompts.validation.validatorchain

Contains the definition of the ValidatorChain class, an immutable, ordered
series of validators that prompt backends use as their validation hook
"""

from dataclasses import dataclass, field
import logging
from typing import Iterable, Tuple, Type

from .. import constants
from ..prompt.exceptions import ValidatorFault
from ..termpromptsexception import TermPromptsException
from .sequencer import (
    SequencedValidator,
    ValidationResult,
    Validator,
    sequence_validators,
)

logger = logging.getLogger(__name__)


def failure_message(result: ValidationResult) -> str:
    """
    Converts a failed validation result into the message shown to the user

    Args:
        result (ValidationResult): A validation result that is not True

    Returns:
        str: The human-readable failure message

    Raises:
        Nothing
    """

    if isinstance(result, str):
        return result

    if result is None or result is False:
        return constants.DEFAULT_VALIDATION_MESSAGE

    return str(result)


@dataclass(frozen=True)
class ValidatorChain:
    """
    class ValidatorChain

    An immutable, ordered series of validators applied with first-failure
    short-circuiting. A chain is built once per prompt and never modified
    """

    validators: Tuple[Validator, ...] = ()
    _sequenced: SequencedValidator = field(init=False, repr=False, compare=False)

    def __post_init__(self: "ValidatorChain") -> None:
        for validator in self.validators:
            if not callable(validator):
                raise TypeError(f"Validator {validator!r} is not callable")

        object.__setattr__(self, "_sequenced", sequence_validators(self.validators))

    def __len__(self: "ValidatorChain") -> int:
        return len(self.validators)

    @classmethod
    def from_validators(
        cls: Type["ValidatorChain"],
        validators: "Validator | Iterable[Validator] | ValidatorChain | None",
    ) -> "ValidatorChain":
        """
        Normalizes the forms callers may pass validators in (nothing, a single
        validator, or an ordered iterable of validators) into a ValidatorChain

        Args:
            validators (Validator | Iterable[Validator] | ValidatorChain | None):
                The validators to normalize

        Returns:
            ValidatorChain: A chain containing the provided validators in order

        Raises:
            TypeError: If any of the provided validators is not callable
        """

        if validators is None:
            return cls()

        if isinstance(validators, ValidatorChain):
            return validators

        if callable(validators):
            return cls((validators,))

        return cls(tuple(validators))

    async def evaluate(self: "ValidatorChain", answer: str) -> ValidationResult:
        """
        Runs every validator in this chain against the provided answer, in
        order, stopping at the first one that does not return True

        Args:
            answer (str): The candidate answer to validate

        Returns:
            ValidationResult: True if every validator passed, otherwise the
                first failure value

        Raises:
            Exception: Anything raised by a validator, unchanged
        """

        return await self._sequenced(answer)

    async def evaluate_message(self: "ValidatorChain", answer: str) -> str | None:
        """
        Validation hook for prompt backends. Runs this chain against the provided answer
        and reports the outcome the way prompt backends expect it

        Args:
            answer (str): The candidate answer to validate

        Returns:
            str | None: None if the answer was accepted, otherwise the message
                to show the user

        Raises:
            ValidatorFault: If a validator raised instead of returning a result
        """

        try:
            result: ValidationResult = await self.evaluate(answer)
        except TermPromptsException:
            raise
        # pylint: disable=broad-exception-caught
        except Exception as exc:
            logger.debug(
                "validator raised %s, aborting the prompt", type(exc).__name__
            )
            raise ValidatorFault(str(exc)) from exc

        return None if result is True else failure_message(result)
