import sys
from typing import IO, Optional, Sequence

from commandline.options import Flag, List, Option, Parameter


def _format_option(option: Option) -> str:
    if isinstance(option, Flag):
        line = f"    {option.option_name()}\n"
    elif isinstance(option, Parameter):
        line = f"    {option.option_name()} ARG\n"
    elif isinstance(option, List):
        line = f"    {option.option_name()} LIST\n"
    else:
        raise TypeError(f"not a command line option: {option!r}")

    if option.description:
        line += f"        {option.description}\n"
    return line


def format_usage(program: str, options: Sequence[Option]) -> str:
    result = f"Usage: {program} [OPTIONS] \n"
    result += "Available options:\n"
    for option in options:
        result += _format_option(option)
    return result


def print_usage(program: str, options: Sequence[Option], file: Optional[IO[str]] = None) -> None:
    """
    Print a message describing usage of the program to stderr.  Options are
    printed in the order given.
    """
    if file is None:
        file = sys.stderr
    print(format_usage(program, options), end="", file=file)
