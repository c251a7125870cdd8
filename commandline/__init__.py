"""
commandline - a command line options parsing library.

Declare options bound to storage you own, parse argv into them, and print
a usage message built from the same declarations::

    help, data, regions = Value(False), Value(""), []
    options = [
        Flag("help", help, "Show help"),
        Parameter("data", data, "Data file"),
        List("regions", regions),
    ]
    parse(sys.argv, options)
    if help.value:
        print_usage(sys.argv[0], options)
"""
from commandline.exceptions import (
    InvalidOptionFormatError,
    OptionException,
    OptionExistsError,
    OptionSpecException,
)
from commandline.options import Flag, Label, List, Option, Parameter, check_options, option_name
from commandline.parser import parse
from commandline.usage import format_usage, print_usage
from commandline.values import AttributeValue, Value

__all__ = [
    "AttributeValue",
    "Flag",
    "InvalidOptionFormatError",
    "Label",
    "List",
    "Option",
    "OptionException",
    "OptionExistsError",
    "OptionSpecException",
    "Parameter",
    "Value",
    "check_options",
    "format_usage",
    "option_name",
    "parse",
    "print_usage",
]
