"""
module termprompts.validation

Contains the validation sequencer that composes validators with first-failure
short-circuiting, the ValidatorChain used as a prompt's validation hook, and
factories for commonly needed validators
"""

from .sequencer import (
    SequencedValidator,
    ValidationResult,
    Validator,
    run_validator,
    sequence_validators,
)
from .validatorchain import ValidatorChain, failure_message
from .validators import matches, max_length, min_length, not_empty, one_of
