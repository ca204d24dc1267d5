"""
module termprompts.config.termpromptsconfig

Contains the definition of the TermPromptsConfig class, a dataclass that represents
a set of termprompts configurations
"""

from dataclasses import dataclass
import json
import logging
import os
from typing import Type

from dataclasses_json import dataclass_json
import platformdirs

from .. import constants

logger = logging.getLogger(__name__)


@dataclass_json
@dataclass
class TermPromptsConfig:
    """
    class TermPromptsConfig

    Dataclass that represents a set of termprompts configurations
    """

    version: str = constants.CONFIG_VERSION
    color_scheme: str = constants.DEFAULT_COLOR_SCHEME
    validate_while_typing: bool = False
    erase_when_done: bool = False

    @staticmethod
    def default_path() -> str:
        """
        Returns the default path that the current user's configuration should be read
        from. The TERMPROMPTS_CONFIG environment variable takes precedence when set

        Args:
            None

        Returns:
            str: The path where the current user's configuration file should be

        Raises:
            Nothing
        """

        if override_path := os.environ.get(constants.CONFIG_PATH_ENV_VAR):
            return override_path

        return os.path.join(
            platformdirs.user_data_dir(
                appname=constants.APPLICATION_NAME,
                version=constants.APPLICATION_VERSION,
            ),
            constants.CONFIG_FILE_NAME,
        )

    @staticmethod
    def _ensure_directory(dir_path: str) -> None:
        if dir_path and not os.path.isdir(dir_path):
            os.makedirs(dir_path)

    @classmethod
    def from_file(
        cls: Type["TermPromptsConfig"], path: str
    ) -> "TermPromptsConfig | None":
        """
        Constructs a TermPromptsConfig instance from the provided JSON file. A
        missing file yields the default settings without anything being written

        Args:
            path (str): The file to read JSON config data from

        Returns:
            TermPromptsConfig | None: A TermPromptsConfig instance containing the
                data from the provided file or None if it could not be read

        Raises:
            Nothing
        """

        # pylint: disable=broad-exception-caught
        try:
            if not os.path.isfile(path):
                logger.debug("no config at %s, using defaults", path)
                return cls.make_default()

            with open(path, "r", encoding="utf-8") as config_file:
                # pylint: disable=no-member
                return cls.from_dict(
                    json.loads(config_file.read()), infer_missing=True
                )
        except Exception as exc:
            logger.warning("Unable to read config from target path '%s': %s", path, exc)
            return None

    @classmethod
    def load(
        cls: Type["TermPromptsConfig"], path: str | None = None
    ) -> "TermPromptsConfig":
        """
        Reads the configuration at the provided path (or the default path) and
        falls back to the default configuration if it cannot be read

        Args:
            path (str | None): The file to read JSON config data from

        Returns:
            TermPromptsConfig: The loaded or default configuration

        Raises:
            Nothing
        """

        config: TermPromptsConfig | None = cls.from_file(
            path if path is not None else cls.default_path()
        )
        return config if config is not None else cls.make_default()

    @staticmethod
    def make_default() -> "TermPromptsConfig":
        return TermPromptsConfig(
            version=constants.CONFIG_VERSION,
            color_scheme=constants.DEFAULT_COLOR_SCHEME,
            validate_while_typing=False,
            erase_when_done=False,
        )

    def to_file(self: "TermPromptsConfig", output_path: str) -> None:
        """
        Writes this TermPromptsConfig instance to the file with the specified path as
        JSON data.

        Args:
            output_path (str): The path of the file to write the config to

        Returns:
            Nothing

        Raises:
            Exception: If the file was unable to be written to
        """

        TermPromptsConfig._ensure_directory(os.path.dirname(output_path))

        with open(output_path, "w", encoding="utf-8") as output_file:
            # pylint: disable=no-member
            print(self.to_json(indent=2), file=output_file)
