import sys
from typing import Optional, Sequence

from commandline import Flag, List, OptionException, Parameter, Value, check_options, parse, print_usage


def main(argv: Optional[Sequence[str]] = None) -> int:
    if argv is None:
        argv = sys.argv

    show_help = Value(False)
    data = Value("")
    regions: list[str] = []
    options = [
        Flag("help", show_help, "Show help"),
        Parameter("data", data, "Data file"),
        List("regions", regions, "Regions to report on"),
    ]

    try:
        check_options(options)
    except OptionException as e:
        print(e, file=sys.stderr)
        return 2

    parse(argv, options)
    if show_help.value:
        print_usage(argv[0], options)
        return 0

    print(f"data: {data.value}")
    print(f"regions: {' '.join(regions)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
