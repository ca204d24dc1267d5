"""
module termprompts.prompt.dataclasses

Contains all dataclass definitions related to prompting the user for input
"""

from .promptrequest import PromptRequest
