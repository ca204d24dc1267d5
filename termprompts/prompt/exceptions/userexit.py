"""
module termprompts.prompt.exceptions.userexit

Contains the definition of the UserExit exception class, an exception
thrown whenever the user has performed an expected action that represents
intent to abandon the current prompt (i.e., ^C or ^D)
"""

from .promptexception import PromptException


class UserExit(PromptException):
    """
    class UserExit

    An exception thrown whenever the user has performed an expected action
    that represents intent to abandon the current prompt
    """
