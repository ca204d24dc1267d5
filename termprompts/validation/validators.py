"""
module termprompts.validation.validators

Contains factories for commonly needed validators. Each factory returns a
coroutine function that resolves to True when a candidate answer passes and
to a failure message otherwise
"""

import re
from typing import Iterable, Set

from .sequencer import ValidationResult, Validator


def not_empty(message: str = "A value is required") -> Validator:
    async def validate_not_empty(answer: str) -> ValidationResult:
        return True if answer.strip() else message

    return validate_not_empty


def min_length(length: int, message: str | None = None) -> Validator:
    if length < 0:
        raise ValueError(f"Minimum length must not be negative (got {length})")

    failure: str = (
        message
        if message is not None
        else f"Must be at least {length} character{'' if length == 1 else 's'} long"
    )

    async def validate_min_length(answer: str) -> ValidationResult:
        return True if len(answer) >= length else failure

    return validate_min_length


def max_length(length: int, message: str | None = None) -> Validator:
    if length < 0:
        raise ValueError(f"Maximum length must not be negative (got {length})")

    failure: str = (
        message
        if message is not None
        else f"Must be at most {length} character{'' if length == 1 else 's'} long"
    )

    async def validate_max_length(answer: str) -> ValidationResult:
        return True if len(answer) <= length else failure

    return validate_max_length


def matches(pattern: "str | re.Pattern[str]", message: str | None = None) -> Validator:
    """
    Builds a validator that accepts answers matching the provided regular
    expression in full

    Args:
        pattern (str | re.Pattern[str]): The expression the whole answer
            must match
        message (str | None): The failure message. Defaults to one naming
            the expression

    Returns:
        Validator: The validator

    Raises:
        re.error: If the provided pattern is not a valid regular expression
    """

    compiled: re.Pattern[str] = re.compile(pattern)
    failure: str = (
        message if message is not None else f"Must match the pattern {compiled.pattern}"
    )

    async def validate_matches(answer: str) -> ValidationResult:
        return True if compiled.fullmatch(answer) is not None else failure

    return validate_matches


def one_of(
    choices: Iterable[str], message: str | None = None, case_sensitive: bool = True
) -> Validator:
    """
    Builds a validator that accepts only one of the provided choices

    Args:
        choices (Iterable[str]): The accepted answers
        message (str | None): The failure message. Defaults to one listing
            the choices
        case_sensitive (bool): Whether answers must match a choice's case

    Returns:
        Validator: The validator

    Raises:
        ValueError: If no choices were provided
    """

    choice_list = list(choices)
    if len(choice_list) == 0:
        raise ValueError("At least one choice is required")

    accepted: Set[str] = {
        choice if case_sensitive else choice.casefold() for choice in choice_list
    }
    failure: str = (
        message
        if message is not None
        else "Must be one of: " + ", ".join(repr(choice) for choice in choice_list)
    )

    async def validate_one_of(answer: str) -> ValidationResult:
        return (
            True
            if (answer if case_sensitive else answer.casefold()) in accepted
            else failure
        )

    return validate_one_of
