import csv
from math import isfinite
from typing import List, Optional, Sequence, Iterable
from structlog import get_logger
from treebench import const
from treebench.errors import MalformedRecord, ResourceUnavailable
from treebench.record import Record

_LOGGER = get_logger()


def parse_rating(raw: str) -> float:
    """unparsable or non finite ratings become 0.0"""

    try:
        rating = float(raw.strip())
    except ValueError:
        return 0.0

    return rating if isfinite(rating) else 0.0


def parse_row(
    cols: Sequence[str],
    title_column: int = const.TITLE_COLUMN,
    rating_column: int = const.RATING_COLUMN,
) -> Record:
    """turn one csv row into a record"""

    if len(cols) <= max(title_column, rating_column):
        raise MalformedRecord(f"expected > {rating_column} columns, got {len(cols)}")

    title = cols[title_column].strip()

    if not title:
        raise MalformedRecord("empty title")

    return Record(title=title, rating=parse_rating(cols[rating_column]))


def read_records(
    lines: Iterable[str],
    limit: Optional[int] = None,
    title_column: int = const.TITLE_COLUMN,
    rating_column: int = const.RATING_COLUMN,
) -> List[Record]:
    """
    first `limit` valid records after the header row. malformed rows are
    skipped and don't count toward the limit
    """

    records: List[Record] = []
    reader = csv.reader(lines)
    next(reader, None)

    for cols in reader:
        if limit is not None and len(records) >= limit:
            break

        try:
            records.append(parse_row(cols, title_column, rating_column))
        except MalformedRecord as err:
            _LOGGER.debug("loader.skip", line=reader.line_num, reason=str(err))

    return records


def load_records(path: str, limit: Optional[int] = None, **kwargs) -> List[Record]:
    """read a dataset file from disk"""

    try:
        with open(path, newline="", encoding="utf-8", errors="replace") as file:
            records = read_records(file, limit=limit, **kwargs)
    except OSError as err:
        raise ResourceUnavailable(f"unable to read {path}") from err

    _LOGGER.debug("loader.done", path=path, limit=limit, loaded=len(records))
    return records
