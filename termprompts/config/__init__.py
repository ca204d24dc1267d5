"""
module termprompts.config

Contains the definition of the TermPromptsConfig dataclass that stores
the settings prompt backends render prompts with
"""

from .termpromptsconfig import TermPromptsConfig
