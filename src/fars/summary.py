"""Month-by-year accident counts built from the yearly FARS files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd

from .datapull import PathLike, _load_years
from .errors import EmptyResultError

logger = logging.getLogger(__name__)


def summarize_frames(frames: Iterable[Optional[pd.DataFrame]], years: Optional[Iterable[int]] = None) -> pd.DataFrame:
    """Count rows per (year, MONTH) and pivot years into columns.

    ``frames`` are (MONTH, year) tables as produced by ``read_years``; ``None``
    entries are skipped. The result has a ``MONTH`` column followed by one
    column per year, both ascending. Month/year pairs with no accidents stay
    NaN rather than 0.

    ``years`` lists the years that loaded; each gets a column even when its
    table has no rows. Without it the years are read from the tables.
    Raises ``EmptyResultError`` when there is no row to count.
    """
    tables = [f for f in frames if f is not None]
    if years is None:
        years = {int(y) for f in tables for y in f["year"].unique()}
    columns = sorted({int(y) for y in years})

    tables = [f for f in tables if not f.empty]
    if not tables:
        raise EmptyResultError("no yearly data to summarize")

    combined = pd.concat(tables, ignore_index=True)
    counts = combined.groupby(["year", "MONTH"]).size().reset_index(name="n")
    table = counts.pivot(index="MONTH", columns="year", values="n").sort_index()
    table = table.reindex(columns=columns)
    table.columns.name = None
    return table.reset_index()


def summarize_years(years: Iterable, data_dir: Optional[PathLike] = None) -> pd.DataFrame:
    """Return the number of accidents per month (rows) and year (columns).

    Years whose files cannot be loaded are warned about and left out. Every
    year that did load gets a column, even if its file holds no records.
    Raises ``EmptyResultError`` when no year loaded or none has a record.
    """
    results = _load_years(years, data_dir)
    loaded = [r for r in results if r.ok]
    logger.info("summarizing %d of %d requested years", len(loaded), len(results))
    return summarize_frames([r.data for r in loaded], years=[r.year for r in loaded])


def export_summary_csv(summary: pd.DataFrame, outpath: PathLike) -> str:
    """Write a summary table to ``outpath`` as CSV and return the path."""
    p = Path(outpath)
    p.parent.mkdir(parents=True, exist_ok=True)
    summary.to_csv(p, index=False)
    return str(p)


__all__ = ["summarize_frames", "summarize_years", "export_summary_csv"]
