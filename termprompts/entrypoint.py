"""
module termprompts.entrypoint

Contains the definition of the main() method that is invoked when termprompts
is run directly as a module or console script. Each subcommand asks the user
one question and reports the answer on stdout (or through the exit code for
confirmations) so that shell scripts can prompt users
"""

import asyncio
from argparse import ArgumentParser, Namespace
import logging
import re
import sys
from typing import List, Sequence

from . import constants
from .config import TermPromptsConfig
from .prompt.backends.prompt_toolkit import PromptToolkitBackend
from .prompt.enums import PromptKind
from .prompt.exceptions import PromptException, UserExit
from .prompter import Prompter
from .validation import Validator, matches, max_length, min_length, not_empty, one_of

_arg_parser: ArgumentParser = ArgumentParser(
    prog=constants.APPLICATION_NAME,
    description="Prompts the user for a confirmation, text, or a password",
)
_arg_parser.add_argument(
    "--config",
    type=str,
    default=None,
    help="Path of the JSON config file to use instead of the default one",
)
_arg_parser.add_argument(
    "-v", "--verbose", action="store_true", help="Log debug output to stderr"
)
_arg_parser.add_argument(
    "--version",
    action="version",
    version=f"%(prog)s {constants.APPLICATION_VERSION}",
)

_sub_parsers = _arg_parser.add_subparsers(dest="kind")
_sub_parsers.required = True

_confirm_parser = _sub_parsers.add_parser(
    PromptKind.CONFIRM,
    help="Asks a yes/no question. Exits with 0 for yes and 1 for no",
)
_confirm_parser.add_argument("message", type=str)
_confirm_parser.add_argument(
    "-y",
    "--default-yes",
    dest="default",
    action="store_true",
    help="Answer yes when the user accepts without typing anything",
)


def _add_validation_arguments(parser: ArgumentParser) -> None:
    parser.add_argument("--min-length", type=int, default=None)
    parser.add_argument("--max-length", type=int, default=None)
    parser.add_argument(
        "--pattern",
        type=str,
        default=None,
        help="Regular expression the whole answer must match",
    )


_input_parser = _sub_parsers.add_parser(
    PromptKind.INPUT, help="Asks for text and prints the answer"
)
_input_parser.add_argument("message", type=str)
_input_parser.add_argument("--default", type=str, default=None)
_input_parser.add_argument(
    "--required", action="store_true", help="Reject empty or blank answers"
)
_input_parser.add_argument(
    "--choice",
    dest="choices",
    action="append",
    default=None,
    help="An accepted answer. May be repeated",
)
_add_validation_arguments(_input_parser)

_password_parser = _sub_parsers.add_parser(
    PromptKind.PASSWORD, help="Asks for a password and prints the answer"
)
_password_parser.add_argument("message", type=str)
_add_validation_arguments(_password_parser)


def _validators_from_args(args: Namespace) -> List[Validator]:
    validators: List[Validator] = []

    if getattr(args, "required", False):
        validators.append(not_empty())
    if (minimum := getattr(args, "min_length", None)) is not None:
        validators.append(min_length(minimum))
    if (maximum := getattr(args, "max_length", None)) is not None:
        validators.append(max_length(maximum))
    if (pattern := getattr(args, "pattern", None)) is not None:
        validators.append(matches(pattern))
    if getattr(args, "choices", None):
        validators.append(one_of(args.choices))

    return validators


async def _prompt(
    prompter: Prompter, args: Namespace, validators: List[Validator]
) -> int:
    match args.kind:
        case PromptKind.CONFIRM:
            if await prompter.confirm(args.message, args.default):
                return 0

            return constants.EXIT_CODE_DECLINED
        case PromptKind.INPUT:
            print(await prompter.input(args.message, validators, args.default))
        case PromptKind.PASSWORD:
            print(await prompter.password(args.message, validators))
        case _:
            raise NotImplementedError(f"Prompt kind '{args.kind}' not implemented")

    return 0


def main(argv: Sequence[str] | None = None, prompter: Prompter | None = None) -> int:
    """
    Asks the user the question described by the command line arguments

    Args:
        argv (Sequence[str] | None): The arguments to parse. Defaults to the
            arguments of the current process
        prompter (Prompter | None): The prompter to ask with. Defaults to one
            rendering with prompt_toolkit

    Returns:
        int: Exit code to be returned to the system

    Raises:
        SystemExit: If the arguments could not be parsed
    """

    args: Namespace = _arg_parser.parse_args(argv)

    validators: List[Validator]
    try:
        validators = _validators_from_args(args)
    except (re.error, ValueError) as exc:
        _arg_parser.error(str(exc))

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if prompter is None:
        prompter = Prompter(PromptToolkitBackend(TermPromptsConfig.load(args.config)))

    try:
        return asyncio.run(_prompt(prompter, args, validators))
    except UserExit:
        return constants.EXIT_CODE_USER_EXIT
    except PromptException as exc:
        print(f"{type(exc).__name__}: {exc}", file=sys.stderr)
        return constants.EXIT_CODE_PROMPT_FAILED
