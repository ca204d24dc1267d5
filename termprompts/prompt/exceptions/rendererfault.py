"""
module termprompts.prompt.exceptions.rendererfault

Contains the definition of the RendererFault exception, which wraps any
failure raised by a prompt backend while it was rendering a prompt (i.e.,
the terminal is unavailable or its input stream was closed)
"""

from .promptexception import PromptException


class RendererFault(PromptException):
    """
    class RendererFault

    An exception that wraps a failure raised by a prompt backend. Its message
    is the message of the original failure, which is kept as __cause__
    """
