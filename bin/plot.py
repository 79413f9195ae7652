import csv
from argparse import ArgumentParser
from collections import defaultdict
from typing import Dict, List
import matplotlib.pyplot as plt
from treebench import const

SERIES = {
    "insert": const.CSV_HEADER[2:6],
    "search": const.CSV_HEADER[6:10],
}


def _load(path: str) -> Dict[str, List[float]]:
    """columns of a results file, averaged per N when a size repeats"""

    totals: Dict[int, Dict[str, List[int]]] = defaultdict(lambda: defaultdict(list))

    with open(path, newline="", encoding="utf-8") as file:
        for row in csv.DictReader(file):
            for name in const.CSV_HEADER[2:]:
                totals[int(row["N"])][name].append(int(row[name]))

    columns: Dict[str, List[float]] = defaultdict(list)

    for n in sorted(totals):
        columns["N"].append(n)
        for name, vals in totals[n].items():
            columns[name].append(sum(vals) / len(vals) / const.NS_PER_SEC)

    return columns


def _main():
    """plot results"""

    parser = ArgumentParser()
    parser.add_argument("results", nargs="?", default=const.OUTPUT_FILE, type=str)
    args = parser.parse_args()
    columns = _load(args.results)
    _, axes = plt.subplots(1, len(SERIES), figsize=(12, 4))

    for axis, (phase, names) in zip(axes, SERIES.items()):
        for name in names:
            label = name.split("_", 1)[1].rsplit("_", 1)[0]
            axis.plot(columns["N"], columns[name], marker="o", label=label)

        axis.set_title(f"{phase} time")
        axis.set_xlabel("N")
        axis.set_ylabel("seconds")
        axis.legend(loc="best")

    plt.tight_layout()
    plt.show()


if __name__ == "__main__":
    _main()
