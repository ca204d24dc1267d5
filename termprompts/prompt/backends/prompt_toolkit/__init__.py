"""
module termprompts.prompt.backends.prompt_toolkit

Contains the PromptToolkitBackend, a prompt backend that renders prompts
with prompt_toolkit
"""

from .prompttoolkitbackend import PromptToolkitBackend
