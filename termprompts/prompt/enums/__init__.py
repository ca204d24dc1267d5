"""
module termprompts.prompt.enums

Contains the definitions of all enum classes that are shared by all
available prompt backends (i.e., they are generic and not specific to
any prompt backend implementation)
"""

from .promptkind import PromptKind
