"""
module termprompts.prompt.abstract

Contains the definition of the PromptBackend abstract base class that
is implemented by individual prompt integrations (i.e., prompt_toolkit)
"""

from .promptbackend import PromptBackend
