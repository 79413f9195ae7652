import logging
import sys
from argparse import ArgumentParser
from typing import List, Optional
import colorama
from structlog import get_logger
from treebench import const, log
from treebench.errors import ResourceUnavailable
from treebench.harness import run_experiments

_LOGGER = get_logger()


def _parser() -> ArgumentParser:
    parser = ArgumentParser(description="time bst vs avl insert and search")
    parser.add_argument("input", help="dataset csv", type=str)
    parser.add_argument(
        "-n",
        "--sizes",
        help="record counts to trial, in order",
        nargs="+",
        type=int,
        default=list(const.EXPERIMENTS),
    )
    parser.add_argument(
        "-o", "--output", help="results csv", default=const.OUTPUT_FILE, type=str
    )
    parser.add_argument("-s", "--seed", help="shuffle seed", type=int)
    parser.add_argument(
        "-q", "--quiet", help="no console summary", action="store_true"
    )
    parser.add_argument("-v", "--verbose", help="debug logging", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """fire it up"""

    args = _parser().parse_args(argv)

    if any(size < 0 for size in args.sizes):
        _LOGGER.error("config.invalid", sizes=args.sizes)
        return 2

    colorama.just_fix_windows_console()
    log.configure(logging.DEBUG if args.verbose else logging.INFO)
    _LOGGER.info("config", input=args.input, sizes=args.sizes, seed=args.seed)

    try:
        run_experiments(
            args.input,
            sizes=args.sizes,
            seed=args.seed,
            output=args.output,
            console=not args.quiet,
        )
    except ResourceUnavailable as err:
        _LOGGER.error("aborted", error=str(err), cause=str(err.__cause__))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
