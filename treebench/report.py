from __future__ import annotations
import csv
import sys
from os.path import exists
from typing import Optional, TextIO, TYPE_CHECKING
from colorama import Fore, Style
from treebench import const
from treebench.errors import ResourceUnavailable

if TYPE_CHECKING:
    from treebench.harness import TrialResult

RULE = "=" * 50
THIN_RULE = "-" * 50


def print_pretty(result: TrialResult, stream: Optional[TextIO] = None) -> None:
    """human readable block for one trial, in seconds. plain text unless tty"""

    stream = stream or sys.stdout
    bright, cyan, reset = ("", "", "")

    if stream.isatty():
        bright, cyan, reset = (Style.BRIGHT, Fore.CYAN, Style.RESET_ALL)

    def line(label: str, bst: str, avl: str) -> str:
        return (
            f"{bright}{label:<17}{reset}"
            f"BST={result.seconds(bst):10.6f}   "
            f"AVL={result.seconds(avl):10.6f}"
        )

    lines = [
        RULE,
        f"{cyan}Dataset: {result.dataset}{reset}",
        f"N      : {result.n}",
        "Units  : seconds",
        THIN_RULE,
        line("INSERT (sorted)", "ins_bst_sorted_ns", "ins_avl_sorted_ns"),
        line("INSERT (random)", "ins_bst_random_ns", "ins_avl_random_ns"),
        line("SEARCH (sorted)", "sea_bst_sorted_ns", "sea_avl_sorted_ns"),
        line("SEARCH (random)", "sea_bst_random_ns", "sea_avl_random_ns"),
        RULE,
    ]

    print("\n".join(lines), file=stream)


def append_csv(path: str, result: TrialResult) -> None:
    """append a row, writing the header first if the file is new"""

    write_header = not exists(path)

    try:
        with open(path, "a", newline="", encoding="utf-8") as file:
            writer = csv.writer(file, lineterminator="\n")

            if write_header:
                writer.writerow(const.CSV_HEADER)

            writer.writerow(result.as_row())
    except OSError as err:
        raise ResourceUnavailable(f"unable to append to {path}") from err
