"""
module termprompts.prompt.dataclasses.promptrequest

Contains the definition of the PromptRequest dataclass, a dataclass used by a
prompt backend to prompt the user for a specific kind of answer and validate
that the input buffer matches a set of criteria.
"""

from dataclasses import dataclass, field

from ..enums import PromptKind
from ...validation import ValidatorChain


@dataclass(frozen=True)
class PromptRequest:
    """
    class PromptRequest

    A dataclass used by a prompt backend to prompt the user for a specific kind
    of answer and validate that the input buffer matches a set of criteria.
    Requests are constructed fresh for every prompt and never reused
    """

    message: str
    kind: PromptKind
    default: str | bool | None = None
    validators: ValidatorChain = field(default_factory=ValidatorChain)
