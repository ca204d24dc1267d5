"""
module termprompts.prompt.exceptions

Contains all definitions of exceptions thrown while prompting the user
"""

from .promptexception import PromptException
from .rendererfault import RendererFault
from .userexit import UserExit
from .validatorfault import ValidatorFault
