from typing import Dict

from termprompts import __version__


APPLICATION_NAME: str = __name__[: __name__.index(".")]
APPLICATION_VERSION: str = __version__

CONFIG_FILE_NAME: str = "config.json"
CONFIG_PATH_ENV_VAR: str = "TERMPROMPTS_CONFIG"
CONFIG_VERSION: str = "0.1"

DEFAULT_COLOR_SCHEME: str = "default"
DEFAULT_VALIDATION_MESSAGE: str = "Invalid input"

EXIT_CODE_DECLINED: int = 1
EXIT_CODE_PROMPT_FAILED: int = 2
EXIT_CODE_USER_EXIT: int = 130

YES_NO_VALUES: Dict[str, bool] = {"y": True, "yes": True, "n": False, "no": False}
