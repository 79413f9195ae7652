from __future__ import annotations
from dataclasses import dataclass, astuple, fields
from random import Random
from time import perf_counter_ns
from typing import Iterable, List, Optional, Sequence, Tuple, Union
from structlog import get_logger
from treebench import const, types
from treebench.avltree import AVLTree
from treebench.bst import BST
from treebench.loader import load_records
from treebench.record import Record
from treebench.report import append_csv, print_pretty

_LOGGER = get_logger()

Tree = Union[BST[Record], AVLTree[Record]]


@dataclass(frozen=True)
class TrialResult:
    """one row of results, field order matches the csv columns"""

    dataset: str
    n: int
    ins_bst_sorted_ns: types.Nanoseconds
    ins_avl_sorted_ns: types.Nanoseconds
    ins_bst_random_ns: types.Nanoseconds
    ins_avl_random_ns: types.Nanoseconds
    sea_bst_sorted_ns: types.Nanoseconds
    sea_avl_sorted_ns: types.Nanoseconds
    sea_bst_random_ns: types.Nanoseconds
    sea_avl_random_ns: types.Nanoseconds

    def as_row(self) -> Tuple:
        return astuple(self)

    def seconds(self, name: str) -> float:
        """convert a timing field to seconds"""

        if name not in self.timing_fields():
            raise KeyError(name)

        return getattr(self, name) / const.NS_PER_SEC

    @classmethod
    def timing_fields(cls) -> List[str]:
        return [f.name for f in fields(cls)][2:]


def time_insert(tree: Tree, records: Iterable[Record]) -> types.Nanoseconds:
    """elapsed ns to insert every record"""

    start = perf_counter_ns()

    for record in records:
        tree.insert(record)

    return perf_counter_ns() - start


def time_search(tree: Tree, records: Iterable[Record]) -> types.Nanoseconds:
    """elapsed ns to look up every record"""

    start = perf_counter_ns()

    for record in records:
        tree.contains(record)

    return perf_counter_ns() - start


def run_trial(
    dataset: str, records: Sequence[Record], rng: Optional[Random] = None
) -> TrialResult:
    """
    build bst and avl trees from a sorted and a shuffled copy of records,
    time the inserts, then time searching each tree for every record in
    the original order
    """

    ordered = sorted(records)
    shuffled = list(records)
    (rng or Random()).shuffle(shuffled)

    bst_sorted: BST[Record] = BST()
    bst_random: BST[Record] = BST()
    avl_sorted: AVLTree[Record] = AVLTree()
    avl_random: AVLTree[Record] = AVLTree()

    ins_bst_sorted = time_insert(bst_sorted, ordered)
    ins_avl_sorted = time_insert(avl_sorted, ordered)
    ins_bst_random = time_insert(bst_random, shuffled)
    ins_avl_random = time_insert(avl_random, shuffled)

    return TrialResult(
        dataset=dataset,
        n=len(records),
        ins_bst_sorted_ns=ins_bst_sorted,
        ins_avl_sorted_ns=ins_avl_sorted,
        ins_bst_random_ns=ins_bst_random,
        ins_avl_random_ns=ins_avl_random,
        sea_bst_sorted_ns=time_search(bst_sorted, records),
        sea_avl_sorted_ns=time_search(avl_sorted, records),
        sea_bst_random_ns=time_search(bst_random, records),
        sea_avl_random_ns=time_search(avl_random, records),
    )


def run_experiments(
    path: str,
    sizes: Sequence[int] = const.EXPERIMENTS,
    seed: Optional[int] = None,
    output: Optional[str] = const.OUTPUT_FILE,
    console: bool = True,
) -> List[TrialResult]:
    """
    one independent trial per size, in order. with a seed, trial i
    shuffles with Random(seed + i). results go to the console and/or are
    appended to output as they finish
    """

    results = []

    for i, size in enumerate(sizes):
        logger = _LOGGER.bind(dataset=path, n=size)
        records = load_records(path, limit=size)
        rng = Random(seed + i) if seed is not None else Random()

        logger.info("trial.start", loaded=len(records))
        result = run_trial(path, records, rng=rng)
        logger.info("trial.done")

        if console:
            print_pretty(result)
        if output:
            append_csv(output, result)

        results.append(result)

    return results
