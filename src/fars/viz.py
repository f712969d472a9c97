"""Visualization helpers for FARS accident data.

Plotting libraries are imported when a plot is requested so the loading and
summary helpers work without them being importable.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import pandas as pd

from .datapull import PathLike, make_filename, read_records
from .errors import InvalidStateError
from .fars_dictionaries import FIELDS, LATITUDE_SENTINEL, LONGITUDE_SENTINEL, state_name

logger = logging.getLogger(__name__)


def clean_coordinates(data: pd.DataFrame) -> pd.DataFrame:
    """Return a copy of ``data`` with sentinel coordinates replaced by NaN.

    FARS records unknown positions as LONGITUD > 900 and LATITUDE > 90.
    """
    out = data.copy()
    out["LONGITUD"] = out["LONGITUD"].mask(out["LONGITUD"] > LONGITUDE_SENTINEL)
    out["LATITUDE"] = out["LATITUDE"].mask(out["LATITUDE"] > LATITUDE_SENTINEL)
    return out


def state_points(data: pd.DataFrame, state_num) -> pd.DataFrame:
    """Select one state's records, with coordinates cleaned.

    Raises ``InvalidStateError`` if ``state_num`` is not among the STATE codes
    present in ``data``, and ``ValueError`` if ``data`` lacks one of the
    required FARS columns.
    """
    missing = [c for c in FIELDS if c not in data.columns]
    if missing:
        raise ValueError(f"missing required columns: {', '.join(missing)}")

    state_num = int(state_num)
    if state_num not in set(data["STATE"].dropna().unique()):
        raise InvalidStateError(state_num)
    subset = data.loc[data["STATE"] == state_num]
    return clean_coordinates(subset)


def plot_state_points(points: pd.DataFrame, out_html: PathLike, title: Optional[str] = None) -> Optional[str]:
    """Draw ``points`` on a folium base map fitted to their coordinate ranges.

    Returns the saved HTML path, or None when there is nothing to draw.
    """
    if points.empty:
        logger.info("no accidents to plot")
        return None

    coords = points[["LATITUDE", "LONGITUD"]].dropna()
    if coords.empty:
        logger.info("no recorded coordinates among %d accidents, nothing to plot", len(points))
        return None

    try:
        import folium  # type: ignore
    except Exception as exc:
        raise RuntimeError("folium is required to draw state maps: pip install folium") from exc

    lat_range = (float(coords["LATITUDE"].min()), float(coords["LATITUDE"].max()))
    lon_range = (float(coords["LONGITUD"].min()), float(coords["LONGITUD"].max()))

    m = folium.Map(tiles="OpenStreetMap")
    m.fit_bounds([[lat_range[0], lon_range[0]], [lat_range[1], lon_range[1]]])
    for lat, lon in coords.itertuples(index=False):
        folium.CircleMarker(
            location=[lat, lon],
            radius=1,
            color="black",
            fill=True,
            weight=1,
        ).add_to(m)

    if title:
        title_html = f"""
        <div style="position: fixed; top: 10px; left: 50px; z-index: 9999; background: #fff; padding: 6px 10px; border-radius: 4px; font-family: Helvetica, Arial, sans-serif; font-size: 14px; font-weight: 600;">
            {title}
        </div>
        """
        m.get_root().html.add_child(folium.Element(title_html))

    out_path = Path(out_html)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    m.save(str(out_path))
    logger.info("plotted %d accidents to %s", len(coords), out_path)
    return str(out_path)


def map_state(state_num, year, data_dir: Optional[PathLike] = None, out_html: Optional[PathLike] = None) -> Optional[str]:
    """Map every accident in one state for one year.

    Loads ``accident_<year>.csv.bz2`` from ``data_dir``, keeps the rows whose
    STATE equals ``state_num`` and writes the map to ``out_html`` (default
    ``state_<code>_<year>.html``). Raises ``FileNotFoundError`` for a missing
    year and ``InvalidStateError`` for a code absent from that year's data.
    Returns the map path, or None when no accident could be drawn.
    """
    filename = make_filename(year, data_dir)
    data = read_records(filename)
    points = state_points(data, state_num)

    code = int(state_num)
    if out_html is None:
        out_html = f"state_{code}_{int(year)}.html"
    title = f"{state_name(code) or f'STATE {code}'} accidents, {int(year)}"
    return plot_state_points(points, out_html, title=title)


def plot_monthly_summary(summary: pd.DataFrame, out_png: PathLike = "monthly_summary.png") -> str:
    """Plot a month-by-year summary table as one line per year (saves PNG)."""
    try:
        import matplotlib.pyplot as plt  # type: ignore
    except Exception as exc:
        raise RuntimeError("matplotlib is required for plotting: install via pip") from exc

    year_cols = [c for c in summary.columns if c != "MONTH"]
    if not year_cols:
        raise ValueError("No year columns available to plot")

    plt.figure(figsize=(10, 5))
    for col in year_cols:
        plt.plot(summary["MONTH"], summary[col], marker="o", label=str(col))
    plt.title("Accidents per month")
    plt.xlabel("Month")
    plt.ylabel("Count")
    plt.xticks(range(1, 13))
    plt.legend(title="Year")
    plt.tight_layout()

    out_path = Path(out_png)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(out_path)
    plt.close()
    return str(out_path)


__all__ = ["clean_coordinates", "state_points", "plot_state_points", "map_state", "plot_monthly_summary"]
