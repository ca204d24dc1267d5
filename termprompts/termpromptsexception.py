"""
module termprompts.termpromptsexception

Contains the definition of the TermPromptsException class, the parent of all
exceptions directly thrown by termprompts and its backend classes
"""


class TermPromptsException(RuntimeError):
    """
    class TermPromptsException

    The parent class of all exceptions directly thrown by termprompts
    and its backend classes
    """
