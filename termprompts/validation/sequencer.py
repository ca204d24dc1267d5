"""
module termprompts.validation.sequencer

Contains the definition of sequence_validators(), which composes an ordered
series of validators into a single validator that stops at the first failure,
along with the type aliases that describe a validator
"""

import inspect
from typing import Any, Awaitable, Callable, Iterable, Tuple

# a validator result is the literal True on success. any other value is a
# failure and carries (or is) the message that should be shown to the user
ValidationResult = Any

Validator = Callable[[str], Awaitable[ValidationResult] | ValidationResult]
SequencedValidator = Callable[[str], Awaitable[ValidationResult]]


async def run_validator(validator: Validator, answer: str) -> ValidationResult:
    """
    Invokes a single validator against a candidate answer. Coroutine functions
    and plain callables are both accepted; the result of a plain callable is
    used as-is

    Args:
        validator (Validator): The validator to invoke
        answer (str): The candidate answer to validate

    Returns:
        ValidationResult: True if the answer passed, otherwise the failure value

    Raises:
        Exception: Anything raised by the validator itself
    """

    result: ValidationResult = validator(answer)
    if inspect.isawaitable(result):
        result = await result

    return result


def sequence_validators(validators: Iterable[Validator]) -> SequencedValidator:
    """
    Composes an ordered series of validators into one validator. The composed
    validator runs each validator in order against the same answer and resolves
    to the first result that is not True. Validators after a failure are never
    invoked. With no validators, the composed validator always resolves to True

    Args:
        validators (Iterable[Validator]): The validators to compose, in the
            order they should run

    Returns:
        SequencedValidator: A coroutine function accepting a candidate answer

    Raises:
        Nothing. The composed validator propagates anything a validator raises
    """

    validator_series: Tuple[Validator, ...] = tuple(validators)

    async def sequenced_validator(answer: str) -> ValidationResult:
        for validator in validator_series:
            if (result := await run_validator(validator, answer)) is not True:
                return result

        return True

    return sequenced_validator
