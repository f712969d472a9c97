"""fars package

Helpers for the yearly FARS accident files: load them, count accidents per
month and year, and map one state's accidents.
"""

from . import datapull as datapull
from . import errors as errors
from . import fars_dictionaries as fars_dictionaries
from . import summary as summary
from . import viz as viz
from .datapull import YearResult, load_years, make_filename, read_records, read_years
from .errors import EmptyResultError, FarsError, InvalidStateError
from .summary import export_summary_csv, summarize_years
from .viz import map_state

__version__ = "0.1.0"

__all__ = [
    "datapull",
    "errors",
    "fars_dictionaries",
    "summary",
    "viz",
    "make_filename",
    "read_records",
    "read_years",
    "load_years",
    "YearResult",
    "summarize_years",
    "export_summary_csv",
    "map_state",
    "FarsError",
    "InvalidStateError",
    "EmptyResultError",
]
