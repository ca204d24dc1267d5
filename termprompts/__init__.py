"""
module termprompts.__init__

Contains the imports of the public prompting surface (confirm(), input(), and
password()) along with the Prompter class they delegate to. Also contains
definitions that indicate the current version of termprompts.
"""

__version_info__: tuple[int, ...] = (0, 1, 0)
__version__: str = ".".join(map(str, __version_info__))

# pylint: disable=redefined-builtin,wrong-import-position
from .prompter import Prompter
from .prompts import confirm, default_prompter, input, password, set_default_prompter
