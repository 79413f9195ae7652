# pylint:disable=redefined-outer-name

from typing import Callable, List, Tuple
from pytest import fixture
from .helpers import HEADER, dataset_row


@fixture
def write_dataset(tmp_path) -> Callable:
    """write a csv in the horror movies layout and return its path"""

    def write(rows: List[Tuple[str, str]], extra: Tuple[str, ...] = ()) -> str:
        lines = [HEADER]
        lines += [dataset_row(title, rating, i) for i, (title, rating) in enumerate(rows)]
        lines += list(extra)
        path = tmp_path / "movies.csv"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return str(path)

    return write
