"""Data-pull utilities for the yearly FARS accident files.

Files are named ``accident_<YEAR>.csv.bz2`` and live in a directory the caller
passes in as ``data_dir``. Expected CSV header (abridged)::

    STATE,ST_CASE,...,MONTH,...,LATITUDE,LONGITUD,...
"""

from __future__ import annotations

import errno
import logging
import numbers
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Union

import pandas as pd

from .fars_dictionaries import FILENAME_PATTERN, YEAR_FIELDS

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def make_filename(year, data_dir: Optional[PathLike] = None) -> str:
    """Return the accident filename for ``year``, e.g. ``accident_2013.csv.bz2``.

    ``year`` goes through ``int()`` so ``"2013"`` and ``2013.0`` work while
    ``"abc"`` raises ``ValueError``. When ``data_dir`` is given the filename is
    joined onto it.
    """
    name = FILENAME_PATTERN.format(year=int(year))
    if data_dir is None:
        return name
    return str(Path(data_dir) / name)


def read_records(path: PathLike) -> pd.DataFrame:
    """Read one accident CSV (optionally compressed) into a DataFrame.

    Compression is inferred from the extension. Raises ``FileNotFoundError``
    if ``path`` is not an existing file. The table is returned as parsed.
    """
    path_obj = Path(path)
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, f"file '{path}' does not exist", str(path))

    with warnings.catch_warnings():
        # mixed-type columns are common in FARS exports; keep pandas quiet about them
        warnings.simplefilter("ignore", pd.errors.DtypeWarning)
        df = pd.read_csv(path_obj, low_memory=False)
    logger.debug("read %d records from %s", len(df), path_obj)
    return df


@dataclass(frozen=True)
class YearResult:
    """Outcome of loading one year: either ``data`` or ``error`` is set."""

    year: int
    data: Optional[pd.DataFrame] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _as_year_list(years) -> list:
    if isinstance(years, (str, numbers.Number)):
        return [years]
    return list(years)


def _load_years(years, data_dir: Optional[PathLike]) -> List[YearResult]:
    # Only called straight from the public wrappers: stacklevel=3 is their caller.
    results: List[YearResult] = []
    for raw_year in _as_year_list(years):
        filename = make_filename(raw_year, data_dir)
        year = int(raw_year)
        try:
            dat = read_records(filename)
            dat = dat.assign(year=year)[YEAR_FIELDS]
        except Exception as exc:
            logger.warning("could not load year %d from %s: %s", year, filename, exc)
            warnings.warn(f"invalid year: {year}", UserWarning, stacklevel=3)
            results.append(YearResult(year=year, error=exc))
            continue
        results.append(YearResult(year=year, data=dat))
    return results


def load_years(years: Iterable, data_dir: Optional[PathLike] = None) -> List[YearResult]:
    """Load the MONTH column of each year's file, tagged with a ``year`` column.

    One ``YearResult`` is returned per input year, in input order. A year whose
    file is missing or unreadable does not stop the batch: a ``UserWarning``
    ("invalid year: <year>") is emitted and the result carries the exception.
    A year that cannot be converted to ``int`` raises immediately.
    """
    return _load_years(years, data_dir)


def read_years(years: Iterable, data_dir: Optional[PathLike] = None) -> List[Optional[pd.DataFrame]]:
    """Like ``load_years`` but returns the tables, with ``None`` for failed years."""
    return [r.data for r in _load_years(years, data_dir)]


__all__ = ["make_filename", "read_records", "YearResult", "load_years", "read_years"]
