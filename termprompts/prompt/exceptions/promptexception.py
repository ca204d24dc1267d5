"""
module termprompts.prompt.exceptions.promptexception

Contains the definition of the PromptException class which is the parent
class of all exceptions that end a prompt without producing an answer
"""

from ...termpromptsexception import TermPromptsException


class PromptException(TermPromptsException):
    """
    class PromptException

    Parent class of all exceptions that end a prompt without producing
    an answer
    """
