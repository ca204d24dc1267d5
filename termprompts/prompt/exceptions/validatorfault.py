"""
module termprompts.prompt.exceptions.validatorfault

Contains the definition of the ValidatorFault exception, thrown when a
validator raises instead of returning a failure message. A fault aborts the
prompt rather than asking the user to try again
"""

from .promptexception import PromptException


class ValidatorFault(PromptException):
    """
    class ValidatorFault

    An exception thrown when a validator raised unexpectedly while checking
    a candidate answer. The original exception is kept as __cause__
    """
