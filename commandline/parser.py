import logging
from typing import Sequence

from commandline.options import Flag, List, Option, Parameter

logger = logging.getLogger(__name__)


def _parse_flag(flag: Flag, args: Sequence[str]) -> None:
    token = flag.option_name()
    for arg in args[1:]:
        if arg == token:
            flag.value.value = True
            logger.debug("%s set", token)


def _parse_parameter(parameter: Parameter, args: Sequence[str]) -> None:
    token = parameter.option_name()
    for i in range(1, len(args) - 1):
        if args[i] == token:
            parameter.value.value = args[i + 1]
            logger.debug("%s = %r", token, args[i + 1])


def _parse_list(option: List, args: Sequence[str]) -> None:
    token = option.option_name()
    i = 1
    while i < len(args):
        if args[i] == token:
            # Values run up to the next "--" token; shorter tokens are values.
            while i + 1 < len(args) and args[i + 1][:2] != "--":
                option.values.append(args[i + 1])
                logger.debug("%s += %r", token, args[i + 1])
                i += 1
        i += 1


def parse(args: Sequence[str], options: Sequence[Option]) -> None:
    """
    Parse the usual argv list, placing the results in the storage bound to
    each option.

    args[0] is the program name and is skipped.  Unknown tokens and missing
    values are ignored.  The options should contain only one option with
    each name.
    """
    for option in options:
        if isinstance(option, Flag):
            _parse_flag(option, args)
        elif isinstance(option, Parameter):
            _parse_parameter(option, args)
        elif isinstance(option, List):
            _parse_list(option, args)
        else:
            raise TypeError(f"not a command line option: {option!r}")
